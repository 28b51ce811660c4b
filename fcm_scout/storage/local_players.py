"""Read path for the static fallback player file (a JSON array of players)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from fcm_scout.common.errors import LocalDataError
from fcm_scout.common.logging_utils import get_logger
from fcm_scout.domain.models import PlayerRecord

logger = get_logger(__name__)


def load_local_players(path: Union[str, Path]) -> list[PlayerRecord]:
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as e:
        raise LocalDataError(str(p), e.strerror or str(e)) from e

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise LocalDataError(str(p), f"invalid JSON: {e}") from e

    if not isinstance(payload, list):
        raise LocalDataError(str(p), f"expected a JSON array, got {type(payload).__name__}")

    try:
        players = [PlayerRecord.model_validate(item) for item in payload]
    except ValidationError as e:
        raise LocalDataError(str(p), f"invalid player entry: {e.error_count()} error(s)") from e

    logger.debug("Loaded %d local players from %s", len(players), p)
    return players
