"""Read the --display choice from a Typer context."""

import typer


def _get_display_format(ctx: typer.Context) -> str:
    """Return the display format stored by the main callback, or ``yaml``.

    Walks up from the command's context so sub-apps see the option given
    before the group name.
    """
    current: typer.Context | None = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
            return obj["display_format"]
        current = current.parent
    return "yaml"
