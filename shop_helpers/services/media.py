from typing import Any, Dict, List, Optional, Protocol, Tuple


PRIMARY_MEDIA_SORT: List[Tuple[str, int]] = [("metadata.priority", 1), ("uploadedAt", 1)]


class MediaStore(Protocol):
    def find_one(self, selector: Dict[str, Any], sort: List[Tuple[str, int]]) -> Optional[Any]:
        ...


def get_primary_media_for_item(media: MediaStore, product_id: Optional[str] = None, variant_id: Optional[str] = None) -> Optional[Any]:
    """Primary media record for a variant, falling back to its product.

    Returns None when neither id is given or nothing matches.
    """
    result = None

    if variant_id:
        result = media.find_one({"metadata.variantId": variant_id}, sort=PRIMARY_MEDIA_SORT)

    if not result and product_id:
        result = media.find_one({"metadata.productId": product_id}, sort=PRIMARY_MEDIA_SORT)

    return result or None


def get_primary_media_for_order_item(media: MediaStore, product_id: Optional[str] = None, variant_id: Optional[str] = None) -> Optional[Any]:
    return get_primary_media_for_item(media, product_id=product_id, variant_id=variant_id)
