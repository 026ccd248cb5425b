import re
from typing import Any, Dict, Optional


_INVALID_CHARS = re.compile(r"([^a-zA-Z0-9_\- ])|^[_0-9]+")
_SEPARATED_WORD = re.compile(r"([ -]+)([a-zA-Z0-9])")
_DIGITS_THEN_LETTER = re.compile(r"([0-9]+)([a-zA-Z])")

I18N_KEY_SUFFIXES = ("Label", "Description", "Placeholder", "Tooltip", "Title")


def to_camel_case(text: str) -> str:
    """camelCase a label for use in i18n keys.

    Punctuation and leading underscores/digits are dropped, words separated by
    spaces or hyphens are joined, and a letter after digits is capitalised:
    ``"Shipping Rates"`` -> ``"shippingRates"``, ``"abc 3d"`` -> ``"abc3D"``.
    """
    s = _INVALID_CHARS.sub("", text).strip().lower()
    s = _SEPARATED_WORD.sub(lambda m: m.group(2).upper(), s)
    s = _DIGITS_THEN_LETTER.sub(lambda m: m.group(1) + m.group(2).upper(), s)
    return s


def _i18n_key(entry: Dict[str, Any]) -> str:
    # Entries without "provides" keep the "undefined" segment existing catalogs use.
    provides = entry.get("provides")
    if provides is None:
        provides = "undefined"
    return f"admin.{provides}.{to_camel_case(entry['label'])}"


def translate_registry(registry: Dict[str, Any], app: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Add i18n key names to a package registry entry.

    The label comes from the entry itself or, failing that, from the first
    registry entry of ``app``. The entry is updated in place and returned.
    """
    i18n_key = ""
    if registry.get("label"):
        i18n_key = _i18n_key(registry)
    elif app and app.get("registry") and app["registry"][0].get("label"):
        i18n_key = _i18n_key(app["registry"][0])

    for suffix in I18N_KEY_SUFFIXES:
        registry[f"i18nKey{suffix}"] = f"{i18n_key}{suffix}"
    return registry


def is_object(item: Any) -> bool:
    return isinstance(item, dict)


def merge_deep(target: Any, source: Any) -> Any:
    """Recursively merge ``source`` into ``target`` in place.

    Nested dicts are merged key by key; any other value overwrites. A truthy
    non-dict value in ``target`` is kept when ``source`` has a dict there.
    """
    if is_object(target) and is_object(source):
        for key, value in source.items():
            if is_object(value):
                current = target.get(key)
                if not is_object(current) and not current:
                    target[key] = {}
                merge_deep(target[key], value)
            else:
                target[key] = value
    return target
