"""PySide6 widget rendering one game's betting options."""

from __future__ import annotations

from functools import partial
from typing import List, Optional, Tuple

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from controller.games import Game
from ui.sections import BetSelection, BettingOption, build_sections


class OddsPanel(QWidget):
    """Shows a game's sections as buttons; unpriced options are disabled."""

    selectionRequested = Signal(object)

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._game: Optional[Game] = None
        self._option_buttons: List[Tuple[BettingOption, QPushButton]] = []
        self._layout = QVBoxLayout(self)
        self.title_label = QLabel("Select a game")
        self._layout.addWidget(self.title_label)
        self._sections_container = QWidget()
        self._sections_layout = QVBoxLayout(self._sections_container)
        self._layout.addWidget(self._sections_container)
        self._layout.addStretch()

    @property
    def game(self) -> Optional[Game]:
        return self._game

    def option_buttons(self) -> List[Tuple[BettingOption, QPushButton]]:
        return list(self._option_buttons)

    def set_game(self, game: Optional[Game]) -> None:
        self._game = game
        self._clear_sections()
        if game is None:
            self.title_label.setText("Select a game")
            return

        self.title_label.setText(f"{game.title}  ·  {game.match_time}")
        sections = build_sections(game)
        if not sections:
            self._sections_layout.addWidget(QLabel("No odds available"))
            return

        for section in sections:
            box = QGroupBox(section.title)
            row = QHBoxLayout(box)
            for option in section.options:
                button = QPushButton(_button_text(option))
                button.setToolTip(f"{option.bet_type}: {option.selection}")
                button.setEnabled(option.clickable)
                button.clicked.connect(partial(self._on_option_clicked, option))
                row.addWidget(button)
                self._option_buttons.append((option, button))
            self._sections_layout.addWidget(box)

    def _on_option_clicked(self, option: BettingOption, _checked: bool = False) -> None:
        if self._game is None:
            return
        selection: Optional[BetSelection] = option.to_selection(self._game)
        if selection is not None:
            self.selectionRequested.emit(selection)

    def _clear_sections(self) -> None:
        self._option_buttons = []
        while self._sections_layout.count():
            item = self._sections_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.setParent(None)
                widget.deleteLater()


def _button_text(option: BettingOption) -> str:
    if option.odds is None:
        return f"{option.label}\n—"
    return f"{option.label}\n{option.odds:.2f}"
