from ._meta import config, logger  # noqa
from .document import SummaryDocument, VerificationStatus, compile_summary  # noqa
from .render import (  # noqa
    SummaryRenderer,
    SummaryRendererRegistry,
    FullTextRenderer,
    CompactTextRenderer,
    format_amount,
    render_summary,
)
