"""Storefront helpers: unit conversion, input validation, slugs and shop URLs."""

from .core.errors import HelperError, InvalidParameter
from .core.strings import is_object, merge_deep, to_camel_case, translate_registry
from .core.units import convert_length, convert_weight
from .core.validation import (
    is_valid_card_number,
    is_valid_cvv,
    is_valid_email,
    is_valid_expire_month,
    is_valid_expire_year,
)
from .services.media import get_primary_media_for_item, get_primary_media_for_order_item
from .services.shop import (
    Shop,
    ShopContext,
    get_absolute_url,
    get_primary_shop_lang,
    get_shop_lang,
    get_shop_name,
    get_shop_prefix,
    get_shop_settings,
)
from .services.slugs import LATIN_LANGS, get_slug, resolve_slugifier

__version__ = "0.1.0"
