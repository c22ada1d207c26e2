"""Setup Screen - pick a display mode and the categories to study."""

from typing import List

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QButtonGroup,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QRadioButton,
    QTreeWidget,
    QTreeWidgetItem,
    QVBoxLayout,
    QWidget,
)

from kotoba_quiz.core import CategoryManifest, DisplayMode

CATEGORY_ID_ROLE = Qt.ItemDataRole.UserRole


class SetupScreen(QWidget):
    """Mode selector plus a checkable group/subgroup/category tree.

    Signals:
        start_requested: (selected category ids, display mode value).
    """

    start_requested = Signal(list, str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._mode_buttons: dict[DisplayMode, QRadioButton] = {}
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)

        title_label = QLabel("Choose a practice mode")
        title_label.setStyleSheet("QLabel { font-size: 20px; font-weight: bold; }")
        layout.addWidget(title_label)

        self.mode_group = QButtonGroup(self)
        for mode in DisplayMode:
            button = QRadioButton(mode.label)
            self.mode_group.addButton(button)
            self._mode_buttons[mode] = button
            layout.addWidget(button)
        # Dictionary is the default for first-time visitors
        self._mode_buttons[DisplayMode.DICTIONARY].setChecked(True)

        categories_label = QLabel("Word lists")
        categories_label.setStyleSheet("QLabel { font-size: 16px; padding-top: 12px; }")
        layout.addWidget(categories_label)

        self.category_tree = QTreeWidget()
        self.category_tree.setHeaderLabels(["Category", "Words"])
        self.category_tree.itemChanged.connect(self._on_item_changed)
        layout.addWidget(self.category_tree, stretch=1)

        self.empty_label = QLabel("No word lists available")
        self.empty_label.setAlignment(Qt.AlignCenter)
        self.empty_label.hide()
        layout.addWidget(self.empty_label)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.start_button = QPushButton("Start")
        self.start_button.setEnabled(False)
        self.start_button.clicked.connect(self._on_start_clicked)
        button_row.addWidget(self.start_button)
        layout.addLayout(button_row)

    def display_manifest(self, manifest: CategoryManifest):
        """Rebuild the category tree from the manifest."""
        self.category_tree.blockSignals(True)
        self.category_tree.clear()

        for group in manifest.groups:
            group_item = QTreeWidgetItem([group.name, ""])
            group_item.setFlags(group_item.flags() | Qt.ItemIsAutoTristate | Qt.ItemIsUserCheckable)
            group_item.setCheckState(0, Qt.Unchecked)
            self.category_tree.addTopLevelItem(group_item)

            for subgroup in group.subgroups:
                subgroup_item = QTreeWidgetItem([subgroup.name, ""])
                subgroup_item.setFlags(
                    subgroup_item.flags() | Qt.ItemIsAutoTristate | Qt.ItemIsUserCheckable
                )
                subgroup_item.setCheckState(0, Qt.Unchecked)
                group_item.addChild(subgroup_item)

                for info in subgroup.categories:
                    category_item = QTreeWidgetItem([info.title, str(info.item_count)])
                    category_item.setFlags(category_item.flags() | Qt.ItemIsUserCheckable)
                    category_item.setCheckState(0, Qt.Unchecked)
                    category_item.setData(0, CATEGORY_ID_ROLE, info.category_id)
                    subgroup_item.addChild(category_item)

        self.category_tree.expandAll()
        self.category_tree.blockSignals(False)

        self.empty_label.setVisible(manifest.total_categories == 0)
        self._update_start_button()

    def selected_categories(self) -> List[str]:
        """Checked category ids in tree order."""
        selected = []
        root = self.category_tree.invisibleRootItem()
        stack = [root.child(i) for i in reversed(range(root.childCount()))]
        while stack:
            item = stack.pop()
            category_id = item.data(0, CATEGORY_ID_ROLE)
            if category_id is not None and item.checkState(0) == Qt.Checked:
                selected.append(category_id)
            stack.extend(item.child(i) for i in reversed(range(item.childCount())))
        return selected

    def selected_mode(self) -> DisplayMode:
        for mode, button in self._mode_buttons.items():
            if button.isChecked():
                return mode
        return DisplayMode.DICTIONARY

    def set_selected_mode(self, mode: DisplayMode):
        self._mode_buttons[mode].setChecked(True)

    def _on_item_changed(self, item: QTreeWidgetItem, column: int):
        self._update_start_button()

    def _update_start_button(self):
        self.start_button.setEnabled(bool(self.selected_categories()))

    def _on_start_clicked(self):
        categories = self.selected_categories()
        if categories:
            self.start_requested.emit(categories, self.selected_mode().value)
