"""
Formattazione testuale dei risultati di ricerca.

Funzioni pure: nessun errore nasce qui, i campi mancanti
diventano placeholder.
"""
from typing import Dict, List, Optional

from core.models import PoiRecord, WebResult

NOT_AVAILABLE = "N/A"
NO_DESCRIPTION = "No description available"
NO_LOCAL_RESULTS = "No local results found"
RESULT_SEPARATOR = "\n---\n"


def format_poi(poi: PoiRecord, description: Optional[str] = None) -> str:
    """
    Formatta un singolo POI come blocco di testo.

    Args:
        poi: Scheda POI
        description: Descrizione associata all'id, se presente

    Returns:
        Blocco multi-riga (Name, Address, Phone, Rating, Price Range, Hours, Description)
    """
    address = ", ".join(poi.address.components()) or NOT_AVAILABLE

    rating = poi.rating
    rating_value = NOT_AVAILABLE
    rating_count = 0
    if rating is not None:
        if rating.rating_value is not None:
            rating_value = rating.rating_value
        if rating.rating_count is not None:
            rating_count = rating.rating_count

    hours = ", ".join(poi.opening_hours) or NOT_AVAILABLE

    return (
        f"Name: {poi.name or NOT_AVAILABLE}\n"
        f"  Address: {address}\n"
        f"  Phone: {poi.phone or NOT_AVAILABLE}\n"
        f"  Rating: {rating_value} ({rating_count} reviews)\n"
        f"  Price Range: {poi.price_range or NOT_AVAILABLE}\n"
        f"  Hours: {hours}\n"
        f"  Description: {description or NO_DESCRIPTION}\n"
        f"  "
    )


def format_local_results(
    pois: Optional[List[PoiRecord]],
    descriptions: Optional[Dict[str, str]]
) -> str:
    """
    Formatta i POI uniti alle descrizioni (left join per id).

    Args:
        pois: Lista POI (None o vuota -> placeholder)
        descriptions: Mappa id -> descrizione

    Returns:
        Blocchi separati da RESULT_SEPARATOR, o NO_LOCAL_RESULTS
    """
    if not pois:
        return NO_LOCAL_RESULTS
    descriptions = descriptions or {}
    return RESULT_SEPARATOR.join(
        format_poi(poi, descriptions.get(poi.id)) for poi in pois
    )


def format_web_results(results: List[WebResult]) -> str:
    """Formatta i risultati web come terne Title/Description/URL."""
    return "\n\n".join(
        f"Title: {r.title}\nDescription: {r.description}\nURL: {r.url}"
        for r in results
    )
