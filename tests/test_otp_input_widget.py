"""Tests for the OTP Qt widgets (offscreen platform)."""

from __future__ import annotations

import pytest
from PySide6.QtCore import Qt
from PySide6.QtTest import QTest
from PySide6.QtWidgets import QLineEdit

from config.settings import settings
from ui.components.otp_cell_edit import OtpCellEdit
from ui.components.otp_input_widget import OtpInputWidget


def cell_texts(widget: OtpInputWidget) -> list[str]:
    return [widget.cell(i).text() for i in range(widget.count)]


def type_into(widget: OtpInputWidget, index: int, text: str) -> None:
    """Simulate the cell reporting a user edit."""
    widget.cell(index).textEdited.emit(text)


@pytest.fixture
def emitted():
    return []


class TestOtpCellEdit:
    def test_user_edit_reports_index_and_text(self, qapp) -> None:
        cell = OtpCellEdit(2)
        seen = []
        cell.cell_changed.connect(lambda i, t: seen.append((i, t)))
        cell.textEdited.emit("7")
        assert seen == [(2, "7")]

    def test_pasted_line_breaks_are_stripped(self, qapp) -> None:
        cell = OtpCellEdit(0)
        seen = []
        cell.cell_changed.connect(lambda i, t: seen.append(t))
        cell.textEdited.emit("123\n456\n")
        assert seen == ["123456"]

    def test_set_cell_value_does_not_report(self, qapp) -> None:
        cell = OtpCellEdit(0)
        seen = []
        cell.cell_changed.connect(lambda i, t: seen.append(t))
        cell.set_cell_value("5")
        assert cell.text() == "5"
        assert seen == []

    def test_arrow_keys_request_navigation(self, qapp) -> None:
        cell = OtpCellEdit(3)
        back, forward = [], []
        cell.back_requested.connect(back.append)
        cell.next_requested.connect(forward.append)
        QTest.keyClick(cell, Qt.Key.Key_Left)
        QTest.keyClick(cell, Qt.Key.Key_Right)
        assert back == [3]
        assert forward == [3]

    def test_backspace_on_empty_cell_goes_back(self, qapp) -> None:
        cell = OtpCellEdit(1)
        back = []
        cell.back_requested.connect(back.append)
        QTest.keyClick(cell, Qt.Key.Key_Backspace)
        assert back == [1]

    def test_backspace_with_text_deletes(self, qapp) -> None:
        cell = OtpCellEdit(1)
        back, edits = [], []
        cell.back_requested.connect(back.append)
        cell.cell_changed.connect(lambda i, t: edits.append(t))
        cell.set_cell_value("4")
        cell.end(False)
        QTest.keyClick(cell, Qt.Key.Key_Backspace)
        assert back == []
        assert edits == [""]

    def test_mask_uses_password_echo(self, qapp) -> None:
        cell = OtpCellEdit(0)
        cell.apply_appearance("large", "filled", "error", True)
        assert cell.echoMode() == QLineEdit.EchoMode.Password
        assert cell.property("otpStatus") == "error"
        assert cell.property("otpVariant") == "filled"


class TestOtpInputWidget:
    def test_renders_count_cells(self, qapp) -> None:
        widget = OtpInputWidget(count=4)
        assert widget.count == 4
        assert cell_texts(widget) == ["", "", "", ""]

    def test_default_value_fills_cells(self, qapp) -> None:
        widget = OtpInputWidget(count=4, default_value="12")
        assert cell_texts(widget) == ["1", "2", "", ""]
        assert widget.get_value() == "12"

    def test_paste_distributes_and_emits(self, qapp, emitted) -> None:
        widget = OtpInputWidget(count=6)
        widget.value_changed.connect(emitted.append)
        type_into(widget, 0, "123456789")
        assert cell_texts(widget) == list("123456")
        assert emitted == ["123456"]

    def test_typing_emits_only_on_completion(self, qapp, emitted) -> None:
        widget = OtpInputWidget(count=3)
        widget.value_changed.connect(emitted.append)
        type_into(widget, 0, "a")
        type_into(widget, 1, "b")
        assert emitted == []
        type_into(widget, 2, "c")
        assert emitted == ["abc"]

    def test_delete_reopens_code(self, qapp, emitted) -> None:
        widget = OtpInputWidget(count=3, default_value="abc")
        widget.value_changed.connect(emitted.append)
        type_into(widget, 2, "")
        assert widget.get_value() == "ab"
        type_into(widget, 2, "c")
        assert emitted == ["abc"]

    def test_formatter_result_is_shown(self, qapp, dash_at_3) -> None:
        widget = OtpInputWidget(count=4, formatter=dash_at_3)
        type_into(widget, 0, "12")
        assert cell_texts(widget) == ["1", "2", "", "-"]

    def test_focus_follows_edits(self, qapp, monkeypatch) -> None:
        widget = OtpInputWidget(count=6)
        focused = []
        for i in range(widget.count):
            monkeypatch.setattr(widget.cell(i), "setFocus", lambda i=i: focused.append(i))
        type_into(widget, 0, "1")
        type_into(widget, 1, "2345678")
        QTest.keyClick(widget.cell(3), Qt.Key.Key_Left)
        QTest.keyClick(widget.cell(0), Qt.Key.Key_Left)
        QTest.keyClick(widget.cell(5), Qt.Key.Key_Right)
        assert focused == [1, 5, 2]

    def test_controlled_value_replaces_cells(self, qapp) -> None:
        widget = OtpInputWidget(count=4, value="1234")
        assert widget.get_value() == "1234"
        widget.set_value("AB")
        assert cell_texts(widget) == ["A", "B", "", ""]

    def test_unchanged_controlled_value_is_ignored(self, qapp) -> None:
        widget = OtpInputWidget(count=4, value="AB")
        type_into(widget, 2, "C")
        widget.set_value("AB")
        assert widget.get_value() == "ABC"

    def test_clear(self, qapp) -> None:
        widget = OtpInputWidget(count=4, default_value="1234")
        widget.clear()
        assert cell_texts(widget) == ["", "", "", ""]

    def test_disabled_is_forwarded(self, qapp) -> None:
        widget = OtpInputWidget(count=3, disabled=True)
        assert not any(widget.cell(i).isEnabled() for i in range(3))
        widget.set_enabled(True)
        assert all(widget.cell(i).isEnabled() for i in range(3))

    def test_status_is_forwarded(self, qapp) -> None:
        widget = OtpInputWidget(count=2, status="warning")
        assert widget.cell(1).property("otpStatus") == "warning"
        widget.set_status("error")
        assert widget.cell(0).property("otpStatus") == "error"

    def test_controlled_value_reapplies_after_clear(self, qapp) -> None:
        widget = OtpInputWidget(count=4, value="AB")
        widget.clear()
        assert widget.get_value() == ""
        widget.set_value("AB")
        assert cell_texts(widget) == ["A", "B", "", ""]

    def test_cells_refresh_when_strict_formatter_raises(self, qapp, monkeypatch) -> None:
        monkeypatch.setattr(settings, "DEBUG", True)
        widget = OtpInputWidget(count=4, formatter=lambda v: "")
        widget.cell(0).setText("x")
        with pytest.raises(ValueError):
            widget._on_cell_changed(0, "x")
        assert widget.get_value() == ""
        assert cell_texts(widget) == ["", "", "", ""]
