from h2_sizing.reporting.summary import (
    NpEncoder,
    build_summary,
    export_summary,
    export_trajectory,
    render_markdown,
)

__all__ = [
    'NpEncoder',
    'build_summary',
    'export_summary',
    'export_trajectory',
    'render_markdown',
]
