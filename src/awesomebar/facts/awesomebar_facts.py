"""Facts emitted by the awesomebar feature."""

from .dispatcher import FactDispatcher
from .fact import Action, Component, Fact


class AwesomeBarFacts:
    """Item identifiers used in awesomebar facts."""

    class Items:
        BOOKMARK_SUGGESTION_CLICKED = "bookmark_suggestion_clicked"
        CLIPBOARD_SUGGESTION_CLICKED = "clipboard_suggestion_clicked"
        HISTORY_SUGGESTION_CLICKED = "history_suggestion_clicked"
        OPENED_TAB_SUGGESTION_CLICKED = "opened_tab_suggestion_clicked"
        SEARCH_ACTION_CLICKED = "search_action_clicked"
        SEARCH_SUGGESTION_CLICKED = "search_suggestion_clicked"


def emit_awesomebar_fact(
    dispatcher: FactDispatcher,
    action: Action,
    item: str,
    value: str | None = None,
    metadata: dict | None = None,
) -> None:
    dispatcher.emit(
        Fact(
            component=Component.FEATURE_AWESOMEBAR,
            action=action,
            item=item,
            value=value,
            metadata=metadata,
        )
    )


def emit_history_suggestion_clicked_fact(dispatcher: FactDispatcher) -> None:
    emit_awesomebar_fact(dispatcher, Action.INTERACTION, AwesomeBarFacts.Items.HISTORY_SUGGESTION_CLICKED)
