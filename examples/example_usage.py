"""Example: export this month's performance report without going through Flask.

Controllers are thin; the same ExportPanel runs here with a console host.
"""

from pathlib import Path

from dotenv import load_dotenv

from config import load_settings

from src.personnel_panel.personnel_panel.container import build_container
from src.personnel_panel.personnel_panel.core.enums import ColorScheme
from src.personnel_panel.personnel_panel.exports.options import ExportOptions


class ConsoleHost:
    def __init__(self, out_dir: Path):
        self._out_dir = out_dir

    def confirm(self, message):
        return input(f"{message} [y/N] ").strip().lower() == "y"

    def notify(self, kind, text):
        print(f"[{kind.value}] {text}")

    def download(self, artifact):
        self._out_dir.mkdir(parents=True, exist_ok=True)
        path = self._out_dir / artifact.filename
        path.write_bytes(artifact.content)
        return path

    def reload(self):
        return None


def main():
    load_dotenv(override=False)
    settings = load_settings()
    container = build_container(
        db_config=settings.DB_CONFIG,
        template_store_path=settings.TEMPLATE_STORE_PATH,
        logo_path=settings.EXPORT_LOGO_PATH,
    )
    panel = container.export_panel

    options = panel.default_options()
    options = ExportOptions.from_dict(
        {"color_scheme": ColorScheme.CORPORATE.value, "include_chart": True},
        base=options,
    )

    path = panel.run_export(options, host=ConsoleHost(Path("exports")))
    print(f"Saved {path}")


if __name__ == "__main__":
    main()
