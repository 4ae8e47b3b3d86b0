"""PySide6 user interface for the shop odds desk."""

from __future__ import annotations

import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from PySide6.QtCore import QObject, QRunnable, Qt, QThreadPool, QTimer, Signal, Slot
from PySide6.QtWidgets import (
    QApplication,
    QComboBox,
    QHBoxLayout,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QPushButton,
    QSplitter,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from controller.games import Game, GamesController
from odds_client.client import ShopApiClient
from odds_client.config import ApiConfig
from odds_client.leagues import ALL_LEAGUES
from persistence.database import Database, LogRecord
from ui.odds_panel import OddsPanel
from ui.sections import BetSelection


class LoadSignals(QObject):
    finished = Signal(object)
    failed = Signal(str)


class LoadRunnable(QRunnable):
    def __init__(self, job: Callable[[], List[Game]]) -> None:
        super().__init__()
        self._job = job
        self.signals = LoadSignals()

    def run(self) -> None:  # pragma: no cover - executed in Qt thread pool
        try:
            games = self._job()
        except Exception as exc:
            self.signals.failed.emit(str(exc))
            return
        self.signals.finished.emit(games)


class MainWindow(QMainWindow):
    def __init__(self, controller: GamesController, database: Database, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Shop Odds")
        self._controller = controller
        self._db = database
        self._games: List[Game] = []
        self._last_log_id = 0
        self._build_ui()

        self._log_timer = QTimer(self)
        self._log_timer.setInterval(3000)
        self._log_timer.timeout.connect(self._poll_logs)
        self._log_timer.start()
        self._poll_logs()

    def _build_ui(self) -> None:
        central = QWidget()
        layout = QVBoxLayout(central)

        controls = QHBoxLayout()
        self.league_combo = QComboBox()
        for league in ALL_LEAGUES:
            self.league_combo.addItem(league.title, league.key)
        self.refresh_button = QPushButton("Refresh")
        self.search_edit = QLineEdit()
        self.search_edit.setPlaceholderText("Search team or index…")
        self.search_button = QPushButton("Search")
        controls.addWidget(self.league_combo)
        controls.addWidget(self.refresh_button)
        controls.addStretch()
        controls.addWidget(self.search_edit)
        controls.addWidget(self.search_button)
        layout.addLayout(controls)

        splitter = QSplitter(Qt.Horizontal)
        self.games_list = QListWidget()
        self.odds_panel = OddsPanel()
        splitter.addWidget(self.games_list)
        splitter.addWidget(self.odds_panel)
        splitter.setStretchFactor(1, 2)
        layout.addWidget(splitter, stretch=1)

        self.log_view = QTextEdit()
        self.log_view.setReadOnly(True)
        self.log_view.setMaximumHeight(140)
        layout.addWidget(self.log_view)

        self.setCentralWidget(central)

        self.refresh_button.clicked.connect(self._load_league)
        self.search_button.clicked.connect(self._search)
        self.search_edit.returnPressed.connect(self._search)
        self.games_list.currentRowChanged.connect(self._on_game_selected)
        self.odds_panel.selectionRequested.connect(self._on_selection)

    def _load_league(self) -> None:
        league_key = self.league_combo.currentData()
        self._start(lambda: self._controller.load_league_games(league_key), f"Loading {league_key}…")

    def _search(self) -> None:
        query = self.search_edit.text()
        self._start(lambda: self._controller.search_games(query), f"Searching '{query}'…")

    def _start(self, job: Callable[[], List[Game]], status: str) -> None:
        runnable = LoadRunnable(job)
        runnable.signals.finished.connect(self.show_games)
        runnable.signals.failed.connect(self._on_failed)
        QThreadPool.globalInstance().start(runnable)
        self.statusBar().showMessage(status)

    @Slot(object)
    def show_games(self, games: object) -> None:
        self._games = list(games) if isinstance(games, list) else []
        self.games_list.clear()
        for game in self._games:
            item = QListWidgetItem(f"{game.title}  ({game.match_time})")
            if not game.odds.has_valid_odds:
                item.setToolTip("No odds available")
            self.games_list.addItem(item)
        self.odds_panel.set_game(None)
        self.statusBar().showMessage(f"{len(self._games)} games")

    @Slot(str)
    def _on_failed(self, message: str) -> None:
        self.statusBar().showMessage(f"Load failed: {message}")
        self._poll_logs()

    @Slot(int)
    def _on_game_selected(self, row: int) -> None:
        game = self._games[row] if 0 <= row < len(self._games) else None
        self.odds_panel.set_game(game)

    @Slot(object)
    def _on_selection(self, selection: BetSelection) -> None:
        self.statusBar().showMessage(
            f"Selected {selection.bet_type} – {selection.selection} @ {selection.odds:.2f}"
        )

    def _poll_logs(self) -> None:
        for record in self._db.fetch_logs(since_id=self._last_log_id):
            self.log_view.append(_format_log(record))
            self._last_log_id = record.id


def _format_log(record: LogRecord) -> str:
    context = f" {record.context}" if record.context else ""
    return f"[{record.created_at.isoformat(timespec='seconds')}] {record.level.upper()}: {record.message}{context}"


def run_app() -> int:
    app = QApplication(sys.argv)
    database = Database(Path(os.environ.get("SHOP_ODDS_DB", "shop_odds.db")))
    database.log("info", "Application started", {"started_at": datetime.utcnow()})
    controller = GamesController(ShopApiClient(ApiConfig.from_env()), database)
    window = MainWindow(controller, database)
    window.resize(1100, 750)
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(run_app())
