"""Desktop interface: pick the band files, run the analysis, view the index maps."""

from __future__ import annotations

import enum
import sys
from typing import Callable, Optional

from PIL import Image

from .pipeline import BandPaths, IndexMaps, MapType, ProcessingError, Resolution, process_files
from .utils import get_short_filename
from .visualization import index_to_image

DEFAULT_WINDOW_WIDTH = 900
DEFAULT_WINDOW_HEIGHT = 750

MISSING_BANDS_TITLE = "Błąd wyboru plików"
MISSING_BANDS_MESSAGE = (
    "Błąd: Nie wszystkie pasma zostały wybrane!\n\n"
    "Proszę wybrać pliki dla pasm B04, B08, B11 oraz SCL."
)
PROCESSING_ERROR_TITLE = "Błąd przetwarzania"
PROCESSING_ERROR_MESSAGE = "Błąd podczas przetwarzania danych. Sprawdź konsolę."

AskFile = Callable[[str, object], Optional[str]]
ShowError = Callable[[str, str], None]


class Band(enum.Enum):
    """An input band the user chooses a file for."""

    B04 = "B04"
    B08 = "B08"
    B11 = "B11"
    SCL = "SCL"

    @property
    def field(self) -> str:
        return self.value.lower()

    @property
    def dialog_suffix(self) -> str:
        return f"pasma {self.value}"

    @property
    def default_label(self) -> str:
        return f"Wczytaj pasmo {self.value}"

    @property
    def label_prefix(self) -> str:
        return f"{self.value}: "


def band_button_label(band: Band | str, path: str | None) -> str:
    """Text of a band's button: the default prompt, or the chosen file's name."""
    band = Band(band)
    if not path:
        return band.default_label
    return band.label_prefix + get_short_filename(path)


def _tk_ask_file(title: str, parent) -> str | None:
    from tkinter import filedialog

    chosen = filedialog.askopenfilename(
        parent=parent,
        title=title,
        filetypes=[("Obrazy JP2 (*.jp2)", "*.jp2 *.JP2")],
    )
    return chosen or None


def _tk_show_error(title: str, message: str) -> None:
    from tkinter import messagebox

    messagebox.showerror(title, message)


class MapWindow:
    """Shows one of the computed index maps, switchable between NDVI and NDMI."""

    def __init__(self, maps: IndexMaps, map_type: MapType | str = MapType.NDVI):
        self.maps = maps
        self.map_type = MapType(map_type)
        self._window = None
        self._canvas = None
        self._photo = None

    @property
    def width(self) -> int:
        return self.maps.width

    @property
    def height(self) -> int:
        return self.maps.height

    def show(self, map_type: MapType | str | None = None) -> Image.Image:
        """Switch to ``map_type`` (or keep the current one) and render it."""
        if map_type is not None:
            self.map_type = MapType(map_type)
        image = index_to_image(self.maps.for_type(self.map_type))
        if self._canvas is not None:
            from PIL import ImageTk

            self._photo = ImageTk.PhotoImage(image)
            self._canvas.delete("all")
            self._canvas.create_image(0, 0, image=self._photo, anchor="nw")
        return image

    def build(self, master, on_close: Callable[[], None] | None = None) -> None:
        """Create the window as a child of ``master`` and draw the current map."""
        import tkinter as tk

        window = tk.Toplevel(master)
        window.title("Wynikowa Mapa Wskaźników")
        window.geometry(f"{DEFAULT_WINDOW_WIDTH}x{DEFAULT_WINDOW_HEIGHT}")
        self._window = window

        radios = tk.Frame(window)
        radios.pack(side="top", anchor="w", padx=10, pady=10)
        choice = tk.StringVar(window, value=self.map_type.value)
        for kind in (MapType.NDMI, MapType.NDVI):
            tk.Radiobutton(
                radios,
                text=kind.value,
                value=kind.value,
                variable=choice,
                command=lambda: self.show(choice.get()),
            ).pack(side="left", padx=5)

        area = tk.Frame(window)
        area.pack(side="top", fill="both", expand=True, padx=10, pady=(0, 10))
        canvas = tk.Canvas(area, background="#1a1a1a")
        x_scroll = tk.Scrollbar(area, orient="horizontal", command=canvas.xview)
        y_scroll = tk.Scrollbar(area, orient="vertical", command=canvas.yview)
        canvas.configure(
            xscrollcommand=x_scroll.set,
            yscrollcommand=y_scroll.set,
            scrollregion=(0, 0, self.width, self.height),
        )
        y_scroll.pack(side="right", fill="y")
        x_scroll.pack(side="bottom", fill="x")
        canvas.pack(side="left", fill="both", expand=True)
        self._canvas = canvas

        def close() -> None:
            self._canvas = None
            self._photo = None
            window.destroy()
            if on_close is not None:
                on_close()

        window.protocol("WM_DELETE_WINDOW", close)
        self.show()


class ConfigWindow:
    """Holds the chosen band files and resolution, and starts the analysis."""

    def __init__(
        self,
        ask_file: AskFile | None = None,
        show_error: ShowError | None = None,
        open_map: Callable[[MapWindow], None] | None = None,
    ):
        self.paths = BandPaths()
        self.resolution = Resolution.R10M
        self._ask_file = ask_file or _tk_ask_file
        self._show_error = show_error or _tk_show_error
        self._open_map = open_map
        self._window = None
        self._buttons: dict[Band, object] = {}

    def choose_band(self, band: Band | str) -> str:
        """Ask for the band's file; keep the old choice on cancel. Returns the button text."""
        band = Band(band)
        chosen = self._ask_file(f"Wybierz plik dla {band.dialog_suffix}", self._window)
        if chosen:
            setattr(self.paths, band.field, str(chosen))
        label = band_button_label(band, getattr(self.paths, band.field))
        button = self._buttons.get(band)
        if button is not None:
            button.configure(text=label)
        return label

    def start(self) -> MapWindow | None:
        """Run the analysis; return the map window, or None after reporting an error."""
        if self.paths.missing():
            self._show_error(MISSING_BANDS_TITLE, MISSING_BANDS_MESSAGE)
            return None
        try:
            maps = process_files(self.paths, self.resolution)
        except ProcessingError as exc:
            print(exc, file=sys.stderr)
            self._show_error(PROCESSING_ERROR_TITLE, PROCESSING_ERROR_MESSAGE)
            return None
        map_window = MapWindow(maps)
        if self._open_map is not None:
            self._open_map(map_window)
        return map_window

    def build(self, master) -> None:
        """Lay out the configuration controls inside ``master``."""
        import tkinter as tk

        self._window = master
        master.title("Konfiguracja Analizy")
        master.geometry(f"{DEFAULT_WINDOW_WIDTH}x{DEFAULT_WINDOW_HEIGHT}")

        radios = tk.Frame(master)
        radios.pack(side="top", anchor="w", padx=10, pady=10)
        choice = tk.StringVar(master, value=self.resolution.value)

        def resolution_changed() -> None:
            self.resolution = Resolution(choice.get())

        for option in (Resolution.R10M, Resolution.R20M):
            tk.Radiobutton(
                radios,
                text=option.label,
                value=option.value,
                variable=choice,
                command=resolution_changed,
            ).pack(side="left", padx=5)

        buttons = tk.Frame(master)
        buttons.pack(side="top", fill="x", padx=10)
        for column, band in enumerate(Band):
            button = tk.Button(
                buttons,
                text=band_button_label(band, getattr(self.paths, band.field)),
                command=lambda b=band: self.choose_band(b),
            )
            button.grid(row=0, column=column, sticky="ew", padx=2)
            buttons.columnconfigure(column, weight=1, uniform="bands")
            self._buttons[band] = button

        tk.Button(master, text="Rozpocznij", command=self.start).pack(
            side="top", anchor="w", padx=10, pady=10
        )


def main(argv: list[str] | None = None) -> int:
    """Start the application; returns the exit status."""
    import tkinter as tk

    root = tk.Tk()

    def open_map(map_window: MapWindow) -> None:
        root.withdraw()
        map_window.build(root, on_close=root.deiconify)

    config = ConfigWindow(open_map=open_map)
    config.build(root)
    root.mainloop()
    status = 0
    print(f"Aplikacja zakończona, status: {status}")
    return status


if __name__ == "__main__":
    sys.exit(main())