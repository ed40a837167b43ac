import csv
import logging
import threading
from pathlib import Path

logger = logging.getLogger(__name__)

LOCALE_TRACK_MISSING_KEYS = True

_load_lock = threading.Lock()


class TranslationManager:
    """
    Manages translations from tab-separated label files.

    File layout: first column is the label (the canonical English text),
    one further column per language, with the language codes in the header.
    Missing entries fall back to the label itself and are logged once.
    """

    def __init__(self):
        self.translations = {}  # {lang: {label: text}}
        self.coverage = {}      # {lang: float}
        self.file_path: Path | None = None
        self._missing_keys_logged = set()

    @property
    def loaded(self) -> bool:
        return self.file_path is not None

    def load_files(self, file_paths: list[Path]) -> None:
        """Loads several translation files; later files override earlier ones."""
        self.translations = {}
        self.coverage = {}
        self.file_path = None
        self._missing_keys_logged = set()
        all_labels: set[str] = set()

        for file_path in file_paths:
            if self.file_path is None:
                self.file_path = Path(file_path).resolve()
            with open(file_path, encoding="utf-8", newline="") as f:
                reader = csv.reader(f, delimiter="\t")
                header = next(reader, None)
                if not header:
                    continue
                langs = header[1:]
                for lang in langs:
                    self.translations.setdefault(lang, {})

                for row in reader:
                    if not row:
                        continue
                    label = row[0]
                    all_labels.add(label)
                    for i, lang in enumerate(langs):
                        text = row[i + 1] if i + 1 < len(row) else ""
                        self.translations[lang][label] = text

        row_count = len(all_labels)
        for lang in self.translations:
            translated = sum(bool(v) for v in self.translations[lang].values())
            self.coverage[lang] = translated / row_count if row_count else 1.0
        logger.debug("Loaded %d labels for languages %s", row_count, self.available_languages())

    def load_file(self, file_path: Path) -> None:
        self.load_files([file_path])

    def available_languages(self) -> list[str]:
        return list(self.translations.keys())

    def t(self, label: str, lang: str) -> str:
        """
        Returns the translation or the label itself as fallback.
        Missing keys are logged only once per (label, lang).
        """
        value = self.translations.get(lang, {}).get(label)
        if value:
            return value

        if LOCALE_TRACK_MISSING_KEYS and (label, lang) not in self._missing_keys_logged:
            logger.info("Missing translation key '%s' (lang=%s)", label, lang)
            self._missing_keys_logged.add((label, lang))

        return label


# Global instance
translations = TranslationManager()


def _ensure_loaded() -> None:
    if translations.loaded:
        return
    with _load_lock:
        if translations.loaded:
            return
        from core.config.config_service import config_service  # noqa: WPS433

        path = config_service.files.labels_tsv
        try:
            translations.load_file(path)
        except OSError as exc:
            # labels are cosmetic; without them every label renders as-is
            logger.warning("Could not read labels file %s: %s", path, exc)
            translations.file_path = Path(path)


def T(label: str) -> str:
    """Translate *label* into the configured UI language."""
    from core.config.config_service import config_service  # noqa: WPS433

    _ensure_loaded()
    return translations.t(label, config_service.general.language)
