"""
Modelli dati per la ricerca locale Brave.

Questo modulo definisce tutti i dataclass utilizzati nel sistema:
- SearchQuery / WebSearchQuery: argomenti validati dei tool
- PoiRecord: scheda di un'attività locale (POI) restituita dall'API
- WebResult: risultato della ricerca web generica (fallback)
- LocalSearchOutcome: esito strutturato di una singola ricerca locale
"""
from dataclasses import dataclass, field
from typing import Optional, Dict, List, Any
import math

from core.exceptions import InvalidArgumentError
from config import (
    DEFAULT_LOCAL_COUNT,
    DEFAULT_WEB_COUNT,
    MAX_COUNT,
    MAX_OFFSET,
)


def _read_number(args: Dict[str, Any], key: str) -> Optional[int]:
    """
    Legge un argomento numerico opzionale.

    Returns:
        Intero (troncato) o None se l'argomento è assente
    """
    value = args.get(key)
    if value is None:
        return None
    # bool è sottoclasse di int
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgumentError(f"'{key}' must be a number, got {type(value).__name__}")
    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidArgumentError(f"'{key}' must be a finite number")
    return int(value)


def _read_query(args: Any, tool_name: str) -> str:
    if not isinstance(args, dict) or not isinstance(args.get("query"), str):
        raise InvalidArgumentError(f"Invalid arguments for {tool_name}")
    query = args["query"]
    if not query.strip():
        raise InvalidArgumentError(f"Invalid arguments for {tool_name}: empty query")
    return query


def _normalize_count(count: Optional[int], default: int) -> int:
    if count is None or count < 1:
        return default
    return min(count, MAX_COUNT)


@dataclass(frozen=True)
class SearchQuery:
    """
    Argomenti validati di brave_local_search.

    Si costruisce solo tramite from_args(): count è già normalizzato
    nell'intervallo [1, MAX_COUNT].
    """
    text: str
    count: int = DEFAULT_LOCAL_COUNT

    @classmethod
    def from_args(cls, args: Any) -> "SearchQuery":
        """
        Valida l'input non tipizzato del tool.

        Args:
            args: Valore arbitrario ricevuto dal chiamante

        Returns:
            SearchQuery validata

        Raises:
            InvalidArgumentError: se manca una 'query' stringa o 'count' non è numerico
        """
        query = _read_query(args, "brave_local_search")
        count = _read_number(args, "count")
        return cls(text=query, count=_normalize_count(count, DEFAULT_LOCAL_COUNT))

    def to_args(self) -> Dict[str, Any]:
        """Argomenti equivalenti per il tool di fallback."""
        return {"query": self.text, "count": self.count}


@dataclass(frozen=True)
class WebSearchQuery:
    """Argomenti validati di brave_web_search."""
    text: str
    count: int = DEFAULT_WEB_COUNT
    offset: int = 0

    @classmethod
    def from_args(cls, args: Any) -> "WebSearchQuery":
        query = _read_query(args, "brave_web_search")
        count = _read_number(args, "count")
        offset = _read_number(args, "offset")
        if offset is None or offset < 0:
            offset = 0
        return cls(
            text=query,
            count=_normalize_count(count, DEFAULT_WEB_COUNT),
            offset=min(offset, MAX_OFFSET),
        )


@dataclass
class PostalAddress:
    """Indirizzo strutturato; tutti i campi sono opzionali."""
    street_address: Optional[str] = None
    address_locality: Optional[str] = None
    address_region: Optional[str] = None
    postal_code: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "PostalAddress":
        data = data or {}
        return cls(
            street_address=data.get("streetAddress"),
            address_locality=data.get("addressLocality"),
            address_region=data.get("addressRegion"),
            postal_code=data.get("postalCode"),
        )

    def components(self) -> List[str]:
        """Componenti non vuote, in ordine via > località > regione > CAP."""
        parts = [
            self.street_address,
            self.address_locality,
            self.address_region,
            self.postal_code,
        ]
        return [p for p in parts if p]


@dataclass
class Coordinates:
    latitude: float
    longitude: float


@dataclass
class Rating:
    """Valutazione media e numero di recensioni."""
    rating_value: Optional[float] = None
    rating_count: Optional[int] = None


@dataclass
class PoiRecord:
    """
    Scheda di un'attività locale restituita da /local/pois.

    Rappresenta i dati come forniti dall'API; i campi assenti
    restano None e vengono resi come placeholder in fase di formattazione.
    """
    id: str
    name: Optional[str] = None
    address: PostalAddress = field(default_factory=PostalAddress)
    coordinates: Optional[Coordinates] = None
    phone: Optional[str] = None
    rating: Optional[Rating] = None
    opening_hours: List[str] = field(default_factory=list)
    price_range: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PoiRecord":
        """
        Costruisce un PoiRecord dal JSON dell'API.

        Args:
            data: Elemento di 'results' della risposta /local/pois

        Returns:
            PoiRecord
        """
        coords = data.get("coordinates")
        rating = data.get("rating")
        return cls(
            id=data.get("id"),
            name=data.get("name"),
            address=PostalAddress.from_dict(data.get("address")),
            coordinates=(
                Coordinates(coords.get("latitude"), coords.get("longitude"))
                if coords else None
            ),
            phone=data.get("phone"),
            rating=(
                Rating(rating.get("ratingValue"), rating.get("ratingCount"))
                if rating else None
            ),
            opening_hours=[h for h in data.get("openingHours") or [] if h],
            price_range=data.get("priceRange"),
        )

    def to_dict(self, description: Optional[str] = None) -> Dict[str, Any]:
        """Converte in dizionario per la tabella dell'interfaccia."""
        return {
            "Nome": self.name or "",
            "Indirizzo": ", ".join(self.address.components()),
            "Telefono": self.phone or "",
            "Rating": self.rating.rating_value if self.rating else None,
            "Recensioni": (self.rating.rating_count or 0) if self.rating else 0,
            "Prezzo": self.price_range or "",
            "Orari": ", ".join(self.opening_hours),
            "Descrizione": description or "",
            "Lat": self.coordinates.latitude if self.coordinates else None,
            "Lon": self.coordinates.longitude if self.coordinates else None,
        }


@dataclass
class WebResult:
    """Risultato della ricerca web generica."""
    title: str = ""
    description: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WebResult":
        return cls(
            title=data.get("title") or "",
            description=data.get("description") or "",
            url=data.get("url") or "",
        )


@dataclass
class LocalSearchOutcome:
    """
    Esito di una ricerca locale.

    O contiene POI e descrizioni, oppure la risposta del fallback
    web quando la ricerca locations non ha restituito id.
    """
    query: SearchQuery
    location_ids: List[str] = field(default_factory=list)
    pois: List[PoiRecord] = field(default_factory=list)
    descriptions: Dict[str, str] = field(default_factory=dict)
    fallback: Optional[Dict[str, Any]] = None

    @property
    def used_fallback(self) -> bool:
        return self.fallback is not None


def text_response(text: str) -> Dict[str, Any]:
    """Envelope di risposta standard dei tool."""
    return {
        "content": [{"type": "text", "text": text}],
        "isError": False,
    }
