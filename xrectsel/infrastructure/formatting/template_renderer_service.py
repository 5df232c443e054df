# xrectsel/infrastructure/formatting/template_renderer_service.py
"""
Renders a region through a printf-like template.

Directives are ``%`` followed by an optional rounding clause ``[N]`` and a
field character:

    %x %y   offset of the left/top edge from the left/top of the screen
    %X %Y   offset of the right/bottom edge from the right/bottom of the screen
    %w %h   width and height
    %b %d   border width and depth of the root window
    %%      a literal percent sign

``%[10]w`` rounds the width down to a multiple of 10. Unknown field
characters produce nothing. Everything outside a directive is copied as is.
"""
from typing import List, Tuple

from xrectsel.domain.common.errors import InvalidDigitError, MalformedRoundingError
from xrectsel.domain.common.result import Result
from xrectsel.domain.models.region_model import Region
from xrectsel.domain.services.i_logger_service import ILoggerService
from xrectsel.domain.services.i_template_renderer_service import ITemplateRendererService

DIRECTIVE = "%"
ROUNDING_OPEN = "["
ROUNDING_CLOSE = "]"

# x, y, X and Y can be negative; w, h, b and d cannot
FIELDS = frozenset("xyXYwhbd")


def round_down(value: int, rounding: int) -> int:
    """Truncate ``value`` toward zero to a multiple of ``rounding`` (0: unchanged)."""
    if rounding <= 0:
        return value
    magnitude = (abs(value) // rounding) * rounding
    return magnitude if value >= 0 else -magnitude


class TemplateRendererService(ITemplateRendererService):
    """Service implementation of the format-string renderer."""

    def __init__(self, logger: ILoggerService):
        self.logger = logger

    def render(self, fmt: str, region: Region) -> Result[str]:
        """
        Render ``fmt`` with the fields of ``region``.

        Args:
            fmt: Template string
            region: The selected region

        Returns:
            Result containing the rendered text, or failing with a
            TemplateSyntaxError subclass if a rounding clause is malformed.
            Nothing is rendered in that case.
        """
        output: List[str] = []
        pos = 0
        length = len(fmt)

        while pos < length:
            char = fmt[pos]
            pos += 1
            if char != DIRECTIVE:
                output.append(char)
                continue

            rounding = 0
            if pos < length and fmt[pos] == ROUNDING_OPEN:
                clause = self._read_rounding(fmt, pos)
                if clause.is_failure:
                    self.logger.debug("Malformed format string", format=repr(fmt), error=clause.error.message)
                    return Result.fail(clause.error)
                rounding, pos = clause.value

            if pos >= length:
                break

            field = fmt[pos]
            pos += 1
            if field == DIRECTIVE:
                output.append(DIRECTIVE)
            elif field in FIELDS:
                output.append(str(round_down(getattr(region, field), rounding)))
            else:
                self.logger.debug("Ignoring unknown directive", directive=f"%{field}")

        return Result.ok("".join(output))

    def validate(self, fmt: str) -> Result[bool]:
        """Run the template against an empty region to surface syntax errors early."""
        blank = Region(root=None, x=0, y=0, w=0, h=0, b=0, d=0, root_width=0, root_height=0)
        return self.render(fmt, blank).map(lambda _: True)

    def _read_rounding(self, fmt: str, start: int) -> Result[Tuple[int, int]]:
        """
        Parse the rounding clause whose ``[`` is at ``start``.

        Returns:
            Result containing ``(rounding, position after the closing bracket)``
        """
        pos = start + 1
        while True:
            if pos >= len(fmt):
                return Result.fail(MalformedRoundingError(position=pos, stop_character=ROUNDING_CLOSE))
            char = fmt[pos]
            if char == ROUNDING_CLOSE:
                break
            if not "0" <= char <= "9":
                return Result.fail(InvalidDigitError(position=pos, character=char))
            pos += 1

        digits = fmt[start + 1:pos]
        return Result.ok((int(digits) if digits else 0, pos + 1))
