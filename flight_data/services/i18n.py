from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Dict, Final, List, Optional, Set

logger = logging.getLogger("flight_data.services.i18n")

LANG_DIR: Final[Path] = Path(__file__).resolve().parent.parent / "lang"

_LOCALE_RE = re.compile(r"^[a-z]{2,3}(?:_[a-z]{2})?$")


class TranslationCatalogError(RuntimeError):
    """Raised when a locale catalogue exists but cannot be used."""


@dataclass(frozen=True)
class Translator:
    """
    Resolves English source strings to the locale's display strings.

    Keys are the literal source strings; anything missing from the
    catalogue is returned unchanged.
    """

    locale: str
    messages: Dict[str, str] = field(default_factory=dict)

    def resolve(self, key: str) -> str:
        return self.messages.get(key, key)

    __call__ = resolve


def normalise_locale(raw: Optional[str]) -> Optional[str]:
    """
    Return a canonical locale code ("es", "pt_br") or None if `raw` is not
    something we are willing to look up on disk.
    """
    if not raw:
        return None
    candidate = raw.strip().lower().replace("-", "_")
    if not _LOCALE_RE.match(candidate):
        return None
    return candidate


@lru_cache
def available_locales(lang_dir: Path = LANG_DIR) -> List[str]:
    return sorted(path.stem for path in lang_dir.glob("*.json"))


def load_catalog(locale: str, lang_dir: Path = LANG_DIR) -> Dict[str, str]:
    """
    Load `<lang_dir>/<locale>.json`. A missing file is an empty catalogue;
    a malformed one raises TranslationCatalogError.
    """
    path = lang_dir / f"{locale}.json"
    if not path.is_file():
        logger.debug("No catalogue for locale %s at %s", locale, path)
        return {}

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        msg = f"Translation catalogue {path} is not valid JSON: {exc}"
        logger.error(msg)
        raise TranslationCatalogError(msg) from exc

    if not isinstance(data, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in data.items()
    ):
        msg = f"Translation catalogue {path} must be a JSON object of string to string."
        logger.error(msg)
        raise TranslationCatalogError(msg)

    logger.info("Loaded %d translations for locale %s", len(data), locale)
    return data


@lru_cache
def get_translator(locale: str) -> Translator:
    """
    Cached per-locale translator. Unknown or invalid locales give an
    identity translator.
    """
    code = normalise_locale(locale)
    if code is None:
        logger.warning("Ignoring invalid locale code %r", locale)
        return Translator(locale="en")
    return Translator(locale=code, messages=load_catalog(code))


def _parse_accept_language(header: str) -> List[str]:
    """Accept-Language tags ordered by quality, highest first."""
    weighted = []
    for index, part in enumerate(header.split(",")):
        piece = part.strip()
        if not piece:
            continue
        tag, *params = piece.split(";")
        quality = 1.0
        for param in params:
            param = param.strip()
            if param.startswith("q="):
                try:
                    quality = float(param[2:])
                except ValueError:
                    quality = 0.0
                break
        if quality > 0:
            weighted.append((-quality, index, tag.strip()))
    return [tag for _, _, tag in sorted(weighted)]


def _match_known(raw: Optional[str], known: Set[str]) -> Optional[str]:
    """Exact locale match first, then the primary subtag ("es_mx" -> "es")."""
    code = normalise_locale(raw)
    if code is None:
        return None
    if code in known:
        return code
    primary = code.split("_", 1)[0]
    if primary in known:
        return primary
    return None


def negotiate_locale(
    *,
    query_lang: Optional[str],
    accept_language: Optional[str],
    default: str,
    supported: List[str],
) -> str:
    """
    Pick a locale for a request: explicit ?lang= first, then the best
    Accept-Language match, then `default`, then English. Every candidate
    goes through the same exact-then-primary-subtag match against the
    supported locales. English is always supported since it is the
    source language.
    """
    known = set(supported) | {"en"}

    explicit = _match_known(query_lang, known)
    if explicit is not None:
        return explicit

    for tag in _parse_accept_language(accept_language or ""):
        code = _match_known(tag, known)
        if code is not None:
            return code

    return _match_known(default, known) or "en"
