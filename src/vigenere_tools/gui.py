import json
import sys
from pathlib import Path
from typing import Dict

from PyQt5 import QtWidgets

from .alphabet import InvalidConfiguration
from .cipher import VigenereCipher
from .config import CipherConfig, load_config, reconfigure, save_config
from .history import log_event
from .shift import VARIANT_LABELS, Variant
from .utils import read_json_object

SETTINGS_PATH = Path.home() / ".vigenere_tools_gui.json"


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self) -> None:
        super().__init__()
        self.setWindowTitle("Vigenère cipher")
        self.resize(760, 560)
        self.settings = self._load_settings()
        self.settings.setdefault("history", True)
        try:
            self.config = load_config()
        except InvalidConfiguration as exc:
            QtWidgets.QMessageBox.warning(self, "Invalid saved settings", str(exc))
            self.config = CipherConfig()

        central = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(central)
        layout.addWidget(self._build_settings_group())
        layout.addWidget(self._build_text_group(), 1)
        self.status = QtWidgets.QLabel("")
        layout.addWidget(self.status)
        self.setCentralWidget(central)

    def _build_settings_group(self) -> QtWidgets.QGroupBox:
        group = QtWidgets.QGroupBox("Settings")
        form = QtWidgets.QFormLayout(group)

        self.variant_combo = QtWidgets.QComboBox()
        for variant in Variant:
            self.variant_combo.addItem(VARIANT_LABELS[variant], variant.value)
        self.variant_combo.setCurrentIndex(self.variant_combo.findData(self.config.variant))

        self.key_edit = QtWidgets.QLineEdit(self.config.key)
        self.key_edit.setPlaceholderText("At least 2 characters from the alphabet")
        self.alphabet_edit = QtWidgets.QLineEdit(self.config.alphabet)

        self.case_check = QtWidgets.QCheckBox("Case sensitive")
        self.case_check.setChecked(self.config.case_sensitive)
        self.foreign_check = QtWidgets.QCheckBox("Include foreign characters")
        self.foreign_check.setChecked(self.config.include_foreign_chars)
        self.history_check = QtWidgets.QCheckBox("Record history")
        self.history_check.setChecked(bool(self.settings.get("history", True)))

        flags = QtWidgets.QHBoxLayout()
        flags.addWidget(self.case_check)
        flags.addWidget(self.foreign_check)
        flags.addWidget(self.history_check)

        save_btn = QtWidgets.QPushButton("Save settings")
        save_btn.clicked.connect(self._save_settings)

        form.addRow(QtWidgets.QLabel("Variant"), self.variant_combo)
        form.addRow(QtWidgets.QLabel("Key"), self.key_edit)
        form.addRow(QtWidgets.QLabel("Alphabet"), self.alphabet_edit)
        form.addRow(flags)
        form.addRow(save_btn)
        return group

    def _build_text_group(self) -> QtWidgets.QWidget:
        widget = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(widget)

        self.input_edit = QtWidgets.QTextEdit()
        self.input_edit.setPlaceholderText("Input text")
        self.output_edit = QtWidgets.QTextEdit()
        self.output_edit.setReadOnly(True)
        self.output_edit.setPlaceholderText("Result")

        encode_btn = QtWidgets.QPushButton("Encode")
        encode_btn.clicked.connect(lambda: self._run_translate(True))
        decode_btn = QtWidgets.QPushButton("Decode")
        decode_btn.clicked.connect(lambda: self._run_translate(False))
        swap_btn = QtWidgets.QPushButton("Use result as input")
        swap_btn.clicked.connect(self._swap_texts)

        buttons = QtWidgets.QHBoxLayout()
        buttons.addWidget(encode_btn)
        buttons.addWidget(decode_btn)
        buttons.addWidget(swap_btn)

        layout.addWidget(self.input_edit)
        layout.addLayout(buttons)
        layout.addWidget(self.output_edit)
        return widget

    def _config_from_form(self) -> CipherConfig:
        return reconfigure(
            self.config,
            variant=self.variant_combo.currentData(),
            key=self.key_edit.text(),
            alphabet=self.alphabet_edit.text(),
            case_sensitive=self.case_check.isChecked(),
            include_foreign_chars=self.foreign_check.isChecked(),
        )

    def _run_translate(self, is_encode: bool) -> None:
        try:
            config = self._config_from_form()
        except InvalidConfiguration as exc:
            QtWidgets.QMessageBox.warning(self, "Invalid settings", str(exc))
            return
        self.config = config
        text = self.input_edit.toPlainText()
        output = VigenereCipher(config).translate(text, is_encode)
        self.output_edit.setPlainText(output)
        self.status.setText(f"{'Encoded' if is_encode else 'Decoded'} {len(text)} characters.")
        if self.history_check.isChecked():
            log_event(
                action="encode" if is_encode else "decode",
                payload={"source": "gui", "variant": config.variant, "input_length": len(text)},
            )

    def _swap_texts(self) -> None:
        self.input_edit.setPlainText(self.output_edit.toPlainText())
        self.output_edit.clear()

    def _load_settings(self) -> Dict[str, object]:
        return read_json_object(SETTINGS_PATH)

    def _save_settings(self) -> None:
        try:
            self.config = self._config_from_form()
            save_config(self.config)
        except InvalidConfiguration as exc:
            QtWidgets.QMessageBox.warning(self, "Invalid settings", str(exc))
            return
        except OSError as exc:  # pragma: no cover - GUI feedback
            QtWidgets.QMessageBox.warning(self, "Save failed", str(exc))
            return
        self.settings["history"] = self.history_check.isChecked()
        try:
            SETTINGS_PATH.write_text(json.dumps(self.settings, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError:
            pass
        self.status.setText("Settings saved.")


def run_gui() -> None:
    app = QtWidgets.QApplication(sys.argv)
    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    run_gui()
