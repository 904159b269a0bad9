import marimo

__generated_with = "0.13.10"
app = marimo.App(width="medium", app_title="notesnav playground")


@app.cell
def _imports():
    import marimo as mo

    return (mo,)


# ---------------------------------------------------------------------------
# Bootstrap: in-memory history + helper
# ---------------------------------------------------------------------------


@app.cell
def _setup():
    import sys
    from pathlib import Path

    _SRC = Path(__file__).parent.parent / "src"
    if str(_SRC) not in sys.path:
        sys.path.insert(0, str(_SRC))

    from notesnav import MemoryHistory, UrlHelper

    history = MemoryHistory("#/p/default/notes")
    url_helper = UrlHelper(history)
    return history, url_helper


# ---------------------------------------------------------------------------
# Controls
# ---------------------------------------------------------------------------


@app.cell
def _controls(mo):
    filter_input = mo.ui.dropdown(
        options=["(none)", "active", "favorite", "trashed", "notebooks", "tags", "search", "task"],
        value="(none)",
        label="Filter",
    )
    query_input = mo.ui.text(placeholder="query", label="Query")
    page_input = mo.ui.number(start=0, stop=100, value=0, label="Page")
    note_input = mo.ui.text(placeholder="note id", label="Note")
    profile_input = mo.ui.text(placeholder="profile id (optional)", label="Profile")
    go_button = mo.ui.run_button(label="Navigate")
    back_button = mo.ui.run_button(label="Back")
    return back_button, filter_input, go_button, note_input, page_input, profile_input, query_input


@app.cell
def _navigate(
    url_helper,
    back_button,
    filter_input,
    go_button,
    note_input,
    page_input,
    profile_input,
    query_input,
):
    filter_args = {
        "filter": None if filter_input.value == "(none)" else filter_input.value,
        "query": query_input.value or None,
        "page": int(page_input.value or 0),
        "profile_id": profile_input.value or None,
    }
    preview = url_helper.get_note_link(id=note_input.value or None, filter_args=filter_args)

    if go_button.value:
        url_helper.navigate(filter_args=filter_args, id=note_input.value or None)
    if back_button.value:
        url_helper.navigate_back(url="/notes")
    url_helper.check_profile()
    return (preview,)


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------


@app.cell
def _layout(
    mo,
    history,
    url_helper,
    back_button,
    filter_input,
    go_button,
    note_input,
    page_input,
    preview,
    profile_input,
    query_input,
):
    state_md = mo.md(
        "\n".join(
            [
                f"- **Link preview:** `{preview}`",
                f"- **Current fragment:** `{url_helper.get_hash()}`",
                f"- **Profile:** `{url_helper.get_profile_id()}` (started as `{url_helper.profile_id}`)",
                f"- **Hash on start:** `{url_helper.channel.request('getHashOnStart')}`",
                f"- **History length:** {url_helper.history_length()}",
                f"- **Reloads requested:** {history.reloads}",
            ]
        )
    )
    layout = mo.vstack(
        [
            mo.md("## Navigation playground"),
            mo.hstack([filter_input, query_input, page_input]),
            mo.hstack([note_input, profile_input]),
            mo.hstack([go_button, back_button], justify="start"),
            mo.divider(),
            state_md,
        ],
        gap="8px",
    )
    return (layout,)


@app.cell
def _render(layout):
    layout  # noqa: B018  marimo displays the last expression as cell output
    return


if __name__ == "__main__":
    app.run()
