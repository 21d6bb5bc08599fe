"""
Data objects exchanged with the backend service
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


def _to_float(value):
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


@dataclass
class SalesRecord:
    """One day of revenue as listed by the backend"""
    date: str = ''
    revenue: float = 0.0
    note: str = ''
    id: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'SalesRecord':
        return cls(
            date=data.get('date') or '',
            revenue=_to_float(data.get('revenue')),
            note=data.get('note') or '',
            id=data.get('_id') or data.get('id'),
        )


@dataclass
class BusinessProfile:
    """UMKM profile; only business_name and owner_name are required"""
    business_name: str = ''
    owner_name: str = ''
    email: str = ''
    phone: str = ''
    address: str = ''
    category: str = ''
    description: str = ''
    id: Optional[str] = None

    FIELDS = ('business_name', 'owner_name', 'email', 'phone', 'address', 'category', 'description')

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'BusinessProfile':
        values = {key: data.get(key) or '' for key in cls.FIELDS}
        return cls(id=data.get('_id') or data.get('id'), **values)

    def to_payload(self) -> Dict[str, str]:
        return {key: getattr(self, key) for key in self.FIELDS}


@dataclass
class PredictionResult:
    """Next-value forecast returned by /api/predict"""
    predicted: float
    method: str
    window: int
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> 'PredictionResult':
        return cls(
            predicted=_to_float(data.get('predicted')),
            method=str(data.get('method') or ''),
            window=int(_to_float(data.get('window'))),
            raw=dict(data),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {'predicted': self.predicted, 'method': self.method, 'window': self.window}
