"""
Content line writer for property sets.
"""

from collections.abc import Iterable

from icalendar.parser import foldline, param_value

from icalkit.models.property import Property, PropertySet
from icalkit.utils.logging_utils import EnhancedLoggerMixin


CRLF = '\r\n'

class ContentLineWriter(EnhancedLoggerMixin):
    """Renders properties as RFC 5545 content lines."""

    def __init__(self, fold_lines: bool = True):
        """Initialize writer."""
        super().__init__()
        self.fold_lines = fold_lines

    @staticmethod
    def render_property(prop: Property) -> str:
        """Render one unfolded ``NAME[;PARAM=VALUE...]:VALUE`` line."""
        params = ''.join(
            f';{key}={param_value(value)}' for key, value in prop.parameters.items()
        )
        return f'{prop.name}{params}:{prop.value}'

    def render_lines(self, properties: Iterable[Property]) -> list[str]:
        lines = [self.render_property(prop) for prop in properties]
        if self.fold_lines:
            return [foldline(line) for line in lines]
        return lines

    def render_component(self, component_type: str, properties: PropertySet) -> str:
        """Wrap properties in a BEGIN/END block, every line CRLF terminated."""
        lines = [f'BEGIN:{component_type}', *self.render_lines(properties), f'END:{component_type}']
        self.logger.debug(f"Rendered {component_type} with {len(properties)} properties")
        return CRLF.join(lines) + CRLF

    def render_calendar(self, components: Iterable[str], properties: PropertySet) -> str:
        """Wrap already rendered components in a VCALENDAR block."""
        head = CRLF.join(['BEGIN:VCALENDAR', *self.render_lines(properties)]) + CRLF
        return head + ''.join(components) + 'END:VCALENDAR' + CRLF
