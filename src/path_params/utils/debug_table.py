"""HTML debug table of decoded path-info fields."""

import html
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.path_params.params import PathInfoParams


def render_params_table(params: "PathInfoParams") -> str:
    """Render every field and value as an HTML table for debugging.

    Names are sorted; values keep their stored order and are numbered from
    zero. Names and values are HTML-escaped.

    Args:
        params: Decoded path-info parameters.

    Returns:
        HTML ``<table>`` markup ending in a newline.

    Example:
        >>> print(render_params_table(PathInfoParams("/a-1")))
        <table border="1" cellspacing="0">
        <tr> <th colspan="2">PATH_INFO Fields</th> </tr>
        <tr> <th>Field</th> <th>Value</th> </tr>
        <tr> <td>a (#0)</td> <td>1</td> </tr>
        </table>
    """
    rows = [
        '<table border="1" cellspacing="0">',
        '<tr> <th colspan="2">PATH_INFO Fields</th> </tr>',
        "<tr> <th>Field</th> <th>Value</th> </tr>",
    ]
    for name in sorted(params.names()):
        e_name = html.escape(name)
        for index, value in enumerate(params.get_list(name)):
            rows.append(
                f"<tr> <td>{e_name} (#{index})</td> <td>{html.escape(value)}</td> </tr>"
            )
    rows.append("</table>")
    return "\n".join(rows) + "\n"
