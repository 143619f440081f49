from __future__ import annotations

import pytest

from fixmixedtabs.columns import InvalidTabWidthError
from fixmixedtabs.converter import Replacement, apply_replacements
from fixmixedtabs.lines import split_lines
from fixmixedtabs.ui.info_bar import (
    FileAction,
    InfoBarAdapter,
    InfoBarController,
    InfoBarState,
)

MIXED = "def f():\n\treturn 1\n    pass\n"


class FakeEditor:
    def __init__(self, content: str, tab_width: int = 4) -> None:
        self.content = content
        self.tab_width = tab_width
        self.shown = 0
        self.hidden = 0
        self.focused = 0
        self.batches: list[list[Replacement]] = []
        self.reject = False

    def get_lines(self):
        return split_lines(self.content)

    def show(self) -> None:
        self.shown += 1

    def hide(self) -> None:
        self.hidden += 1

    def focus_editor(self) -> None:
        self.focused += 1

    def apply(self, replacements: list[Replacement]) -> bool:
        self.batches.append(replacements)
        if self.reject:
            return False
        self.content = apply_replacements(self.content, replacements)
        return True

    def make_controller(self) -> InfoBarController:
        return InfoBarController(
            InfoBarAdapter(
                get_lines=self.get_lines,
                get_tab_width=lambda: self.tab_width,
                show=self.show,
                hide=self.hide,
                apply_replacements=self.apply,
                focus_editor=self.focus_editor,
            )
        )


def test_check_shows_bar_for_mixed_document():
    editor = FakeEditor(MIXED)
    controller = editor.make_controller()

    assert controller.check() is True
    assert controller.state is InfoBarState.SHOWN
    assert editor.shown == 1

    controller.check()
    assert editor.shown == 1


def test_check_leaves_consistent_document_hidden():
    editor = FakeEditor("\tfoo\n  bar\n")
    controller = editor.make_controller()

    assert controller.check() is False
    assert controller.state is InfoBarState.HIDDEN
    assert editor.shown == 0


def test_only_first_focus_triggers_check():
    editor = FakeEditor("plain\n")
    controller = editor.make_controller()

    controller.on_focus()
    editor.content = MIXED
    controller.on_focus()

    assert controller.state is InfoBarState.HIDDEN


@pytest.mark.parametrize(
    "action, shown",
    [
        (FileAction.CONTENT_LOADED, True),
        (FileAction.CONTENT_SAVED, True),
        (FileAction.CONTENT_LOADED | FileAction.RENAMED, True),
        (FileAction.RENAMED, False),
    ],
)
def test_file_actions_trigger_check(action, shown):
    editor = FakeEditor(MIXED)
    controller = editor.make_controller()

    controller.on_file_action(action)

    assert (controller.state is InfoBarState.SHOWN) is shown


def test_tabify_applies_batch_and_closes_bar():
    editor = FakeEditor(MIXED)
    controller = editor.make_controller()
    controller.check()

    assert controller.tabify() is True
    assert editor.content == "def f():\n\treturn 1\n\tpass\n"
    assert controller.state is InfoBarState.HIDDEN
    assert editor.hidden == 1
    assert editor.focused == 1


def test_untabify_applies_batch_and_closes_bar():
    editor = FakeEditor(MIXED)
    controller = editor.make_controller()
    controller.check()

    assert controller.untabify() is True
    assert editor.content == "def f():\n    return 1\n    pass\n"
    assert controller.state is InfoBarState.HIDDEN


def test_rejected_batch_leaves_bar_and_document_alone():
    editor = FakeEditor(MIXED)
    editor.reject = True
    controller = editor.make_controller()
    controller.check()

    assert controller.untabify() is False
    assert editor.content == MIXED
    assert controller.state is InfoBarState.SHOWN
    assert len(editor.batches) == 1


def test_empty_batch_still_closes_bar():
    editor = FakeEditor(MIXED)
    controller = editor.make_controller()
    controller.check()
    editor.content = "plain\n"

    assert controller.tabify() is True
    assert editor.batches == []
    assert controller.state is InfoBarState.HIDDEN


def test_hide_returns_to_hidden_and_allows_later_checks():
    editor = FakeEditor(MIXED)
    controller = editor.make_controller()
    controller.check()

    controller.hide()
    assert controller.state is InfoBarState.HIDDEN

    controller.on_file_action(FileAction.CONTENT_SAVED)
    assert controller.state is InfoBarState.SHOWN
    assert editor.shown == 2


def test_dont_show_again_disables_for_good():
    editor = FakeEditor(MIXED)
    controller = editor.make_controller()
    controller.check()

    controller.dont_show_again()

    assert controller.state is InfoBarState.DISABLED
    assert editor.hidden == 1
    assert controller.check() is False
    controller.on_focus()
    controller.on_file_action(FileAction.CONTENT_LOADED)
    assert controller.state is InfoBarState.DISABLED
    assert editor.shown == 1


def test_view_closed_disables_without_hiding_a_hidden_bar():
    editor = FakeEditor(MIXED)
    controller = editor.make_controller()

    controller.on_view_closed()

    assert controller.state is InfoBarState.DISABLED
    assert controller.enabled is False
    assert editor.hidden == 0


def test_conversion_still_works_after_disable():
    editor = FakeEditor(MIXED)
    controller = editor.make_controller()
    controller.dont_show_again()

    assert controller.untabify() is True
    assert "\t" not in editor.content
    assert controller.state is InfoBarState.DISABLED


def test_invalid_tab_width_is_not_swallowed():
    editor = FakeEditor(MIXED, tab_width=0)
    controller = editor.make_controller()

    with pytest.raises(InvalidTabWidthError):
        controller.check()
    with pytest.raises(InvalidTabWidthError):
        controller.tabify()
