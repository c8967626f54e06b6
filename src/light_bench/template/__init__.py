"""Compiled placeholder templates, renderers and output channels."""

from .channel import (
    NO_TEMPLATE as NO_TEMPLATE,
)
from .channel import (
    TemplateChannel as TemplateChannel,
)
from .compiler import (
    CompiledTemplate as CompiledTemplate,
)
from .compiler import (
    FieldSpec as FieldSpec,
)
from .compiler import (
    compile_template as compile_template,
)
from .render import (
    UNKNOWN_FIELD as UNKNOWN_FIELD,
)
from .render import (
    MappingSource as MappingSource,
)
from .render import (
    ReportSource as ReportSource,
)
from .render import (
    format_value as format_value,
)
from .render import (
    render as render,
)
from .render import (
    sformat as sformat,
)
