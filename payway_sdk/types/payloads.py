"""The signed output handed to renderers and transports."""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping


@dataclass(slots=True, frozen=True)
class SignedPayload:
    """Gateway fields in contract order, their signature and the post target.

    ``fields`` already contains the signature under the gateway's field name
    (``hash``), so it can be rendered 1:1 as hidden form inputs.
    """

    fields: Mapping[str, str]
    signature: str
    target_url: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def as_form(self) -> Dict[str, str]:
        return dict(self.fields)
