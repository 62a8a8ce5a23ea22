from collections.abc import Iterable

import plotly.graph_objs as go

from salt_color import color
from salt_color.models import ColorOptions, DEFAULT_OPTIONS
from salt_color.utils import canonical_seed_string, hsl_to_hex


def swatch_plot(salts: Iterable, options=None, defaults: ColorOptions = DEFAULT_OPTIONS) -> go.Figure:
    """Bar swatches showing the color each salt receives.

    Args:
        salts (Iterable): Salts to preview
        options (ColorOptions | dict | None, optional): Range overrides
        defaults (ColorOptions, optional): Fallback ranges. Defaults to DEFAULT_OPTIONS.

    Returns:
        go.Figure: One bar per salt filled with its color
    """
    options = ColorOptions.coerce(options)
    labels, colors, hsl_data = [], [], []
    for salt in salts:
        hsl = color.get_hsl(salt, options, defaults)
        labels.append(canonical_seed_string(salt))
        colors.append(hsl_to_hex(hsl.hue, hsl.saturation, hsl.lightness))
        hsl_data.append([hsl.hue, hsl.saturation, hsl.lightness])

    hovertemplate = (
        '%{x}<br>'
        + 'Hue: %{customdata[0]}<br>'
        + 'Saturation: %{customdata[1]}%<br>'
        + 'Lightness: %{customdata[2]}%<br>'
        + '%{marker.color}<extra></extra>'
    )
    graph = go.Bar(
        x=labels,
        y=[1] * len(labels),
        customdata=hsl_data,
        marker=dict(color=colors, line=dict(width=0)),
        hovertemplate=hovertemplate,
        name='',
    )

    fig = go.Figure(graph)
    fig.update_yaxes(visible=False, range=[0, 1])
    fig.update_layout(bargap=0.05, showlegend=False, plot_bgcolor='white')
    return fig
