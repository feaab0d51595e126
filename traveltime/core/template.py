"""
Output template rendering

Templates are plain text with {{ Field }} placeholders. A leading dot is
accepted, so formats written as "{{ .Origin.Name }}" keep working. Only the
fields listed in FIELDS can be referenced.
"""

import re
from typing import Callable, Dict, List, Optional, Tuple

from .errors import TemplateError
from .models import TravelResult

DEFAULT_FORMAT = "{{ .Origin.Name }}: {{ .WithTraffic }} {{ .Deviation.Absolute }}min"

FIELDS: Dict[str, Callable[[TravelResult], object]] = {
    "Origin.Name": lambda result: result.origin.name,
    "Origin.Lat": lambda result: result.origin.latitude,
    "Origin.Lng": lambda result: result.origin.longitude,
    "Origin.LatLng": lambda result: result.origin.coordinate,
    "Origin.LatLng.Lat": lambda result: result.origin.latitude,
    "Origin.LatLng.Lng": lambda result: result.origin.longitude,
    "Destination.Name": lambda result: result.destination.name,
    "Destination.Lat": lambda result: result.destination.latitude,
    "Destination.Lng": lambda result: result.destination.longitude,
    "Destination.LatLng": lambda result: result.destination.coordinate,
    "Destination.LatLng.Lat": lambda result: result.destination.latitude,
    "Destination.LatLng.Lng": lambda result: result.destination.longitude,
    "WithTraffic": lambda result: result.with_traffic,
    "NoTraffic": lambda result: result.no_traffic,
    "Deviation.Relative": lambda result: result.deviation.relative,
    "Deviation.Absolute": lambda result: result.deviation.absolute,
}

_ACTION_PATTERN = re.compile(r"\{\{(.*?)\}\}", re.DOTALL)
_FIELD_PATTERN = re.compile(r"^\.?([A-Za-z]\w*(?:\.[A-Za-z]\w*)*)$")


class OutputTemplate:
    """Compiled output template"""

    def __init__(self, source: str = DEFAULT_FORMAT):
        self.source = source
        # (literal text, field name or None)
        self._parts: List[Tuple[str, Optional[str]]] = self._compile(source)

    @property
    def fields(self) -> List[str]:
        """Field names referenced by this template, in order"""
        return [field for _, field in self._parts if field is not None]

    @staticmethod
    def _compile(source: str) -> List[Tuple[str, Optional[str]]]:
        parts = []
        position = 0

        for match in _ACTION_PATTERN.finditer(source):
            literal = source[position:match.start()]
            _check_literal(source, literal)

            expression = match.group(1).strip()
            if not expression:
                raise TemplateError(f"Invalid format {source!r}: empty placeholder")

            field_match = _FIELD_PATTERN.match(expression)
            if not field_match:
                raise TemplateError(f"Invalid format {source!r}: bad placeholder {{{{{expression}}}}}")

            field = field_match.group(1)
            if field not in FIELDS:
                raise TemplateError(
                    f"Invalid format {source!r}: unknown field {field!r}. "
                    f"Valid fields: {', '.join(FIELDS)}"
                )

            parts.append((literal, field))
            position = match.end()

        tail = source[position:]
        _check_literal(source, tail)
        parts.append((tail, None))
        return parts

    def render(self, result: TravelResult) -> str:
        """Render a travel result into text"""
        chunks = []
        for literal, field in self._parts:
            chunks.append(literal)
            if field is not None:
                chunks.append(str(FIELDS[field](result)))
        return "".join(chunks)


def _check_literal(source: str, literal: str) -> None:
    if "{{" in literal:
        raise TemplateError(f"Invalid format {source!r}: unclosed placeholder")
