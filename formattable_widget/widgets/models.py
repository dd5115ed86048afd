"""
Widget Models - formattable-widget

Immutable widget descriptor handed to display layers (notebooks, web pages,
interactive viewers).
"""

import json
import numbers
from typing import Dict, Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


WIDGET_NAME = "formattable_widget"
WIDGET_PACKAGE = "formattable"

Size = Union[str, int, float, None]


def css_size(value: Size) -> Optional[str]:
    """Normalize a size: numbers become pixels, strings pass through"""
    if value is None:
        return None
    if isinstance(value, numbers.Number) and not isinstance(value, bool):
        return f"{value}px"
    return str(value)


class WidgetDescriptor(BaseModel):
    """Rendered formattable widget: html fragment, source text and size"""
    model_config = ConfigDict(frozen=True)

    html: str = Field(..., description="HTML fragment with alignment classes applied")
    markdown: str = Field(..., description="Line-break-stripped markdown the html was converted from")
    width: Optional[str] = Field("100%", description="CSS width of the widget")
    height: Optional[str] = Field(None, description="CSS height of the widget")
    name: str = Field(WIDGET_NAME, description="Widget kind")
    package: str = Field(WIDGET_PACKAGE, description="Package that produced the widget")
    element_id: Optional[str] = Field(None, description="DOM id of the mount point")

    @field_validator("width", "height", mode="before")
    @classmethod
    def _normalize_size(cls, value: Any) -> Optional[str]:
        return css_size(value)

    def payload(self) -> Dict[str, str]:
        """Data object consumed by the client-side widget script"""
        return {"html": self.html, "md": self.markdown}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "x": self.payload(),
            "width": self.width,
            "height": self.height,
            "name": self.name,
            "package": self.package,
            "elementId": self.element_id,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())

    def _repr_html_(self) -> str:
        # Imported here because the renderer depends on this module
        from .renderer import WidgetTemplateRenderer
        return WidgetTemplateRenderer().render_fragment(self)
