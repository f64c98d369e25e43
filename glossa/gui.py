"""Tkinter-based user interface for Glossa."""

from __future__ import annotations

import threading
from typing import Any, Callable, Optional

import tkinter as tk
from tkinter import messagebox, ttk

from .configuration import GlossaConfig
from .translator import TranslationSummary


TranslationExecutor = Callable[..., tuple[int, Optional[TranslationSummary], Optional[str]]]


def initial_text(args: Any) -> str:
    """Phrases given on the command line, one per line."""

    return "\n".join(getattr(args, "phrases", None) or [])


class GlossaGUI:
    """Input box, output box, and the Translate / Exit buttons."""

    def __init__(
        self,
        *,
        root: tk.Tk,
        args: Any,
        settings: GlossaConfig,
        translation_executor: TranslationExecutor,
        provider_debug: bool,
    ) -> None:
        self.root = root
        self.args = args
        self.settings = settings
        self.provider_debug = provider_debug
        self.translation_executor = translation_executor

        self.exit_code: int = 0
        self.translation_in_progress = False

        self._build_variables()
        self._build_ui()

        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

    def _build_variables(self) -> None:
        self.source_language_var = tk.StringVar(
            value=getattr(self.args, "source_language", None)
            or self.settings.GLOSSA_SOURCE_LANGUAGE
        )
        self.target_language_var = tk.StringVar(
            value=getattr(self.args, "target_language", None)
            or self.settings.GLOSSA_TARGET_LANGUAGE
        )
        self.status_var = tk.StringVar(value="Type some text and press Translate.")

    def _build_ui(self) -> None:
        self.root.title("Glossa Translator")
        self.root.geometry("560x480")

        main_frame = ttk.Frame(self.root, padding=16)
        main_frame.grid(row=0, column=0, sticky="nsew")
        self.root.columnconfigure(0, weight=1)
        self.root.rowconfigure(0, weight=1)
        main_frame.columnconfigure(1, weight=1)
        main_frame.columnconfigure(3, weight=1)

        ttk.Label(main_frame, text="From").grid(row=0, column=0, sticky="w")
        ttk.Entry(main_frame, textvariable=self.source_language_var, width=16).grid(
            row=0, column=1, sticky="we", padx=(6, 12)
        )
        ttk.Label(main_frame, text="To").grid(row=0, column=2, sticky="w")
        ttk.Entry(main_frame, textvariable=self.target_language_var, width=16).grid(
            row=0, column=3, sticky="we", padx=(6, 0)
        )

        self.input_text = tk.Text(main_frame, height=8, wrap="word")
        self.input_text.grid(row=1, column=0, columnspan=4, sticky="nsew", pady=(12, 6))
        self.input_text.insert("1.0", initial_text(self.args))
        self.output_text = tk.Text(main_frame, height=8, wrap="word", state="disabled")
        self.output_text.grid(row=2, column=0, columnspan=4, sticky="nsew", pady=(6, 12))
        main_frame.rowconfigure(1, weight=1)
        main_frame.rowconfigure(2, weight=1)

        ttk.Label(main_frame, textvariable=self.status_var, foreground="#555").grid(
            row=3, column=0, columnspan=4, sticky="w", pady=(0, 10)
        )

        action_frame = ttk.Frame(main_frame)
        action_frame.grid(row=4, column=0, columnspan=4, sticky="e")
        self.translate_button = ttk.Button(
            action_frame, text="Translate", command=self._on_translate
        )
        self.translate_button.grid(row=0, column=0, padx=(0, 10))
        ttk.Button(action_frame, text="Exit", command=self._on_close).grid(row=0, column=1)

        self.root.bind("<Control-Return>", self._on_translate_event)

    def _on_translate_event(self, event: Any) -> None:
        self._on_translate()

    def _on_translate(self) -> None:
        if self.translation_in_progress:
            return

        phrase = self.input_text.get("1.0", "end-1c")
        if not phrase.strip():
            messagebox.showerror("Glossa", "Please enter some text to translate.")
            return

        config = {
            "source_language": self.source_language_var.get().strip() or None,
            "target_language": self.target_language_var.get().strip() or None,
            "provider": getattr(self.args, "provider", None),
        }

        self.translation_in_progress = True
        self.status_var.set("Translating...")
        self.translate_button.config(state="disabled")

        threading.Thread(
            target=self._execute_translation,
            args=(phrase, config),
            daemon=True,
        ).start()

    def _execute_translation(self, phrase: str, config: dict[str, Any]) -> None:
        """Runs in the worker thread; results go back through ``root.after``."""

        _exit_code, summary, message = self.translation_executor(
            phrases=[phrase],
            settings=self.settings,
            non_interactive=True,
            verbose=False,
            provider_debug=self.provider_debug,
            **config,
        )
        self.root.after(0, self._handle_result, summary, message)

    def _handle_result(
        self,
        summary: Optional[TranslationSummary],
        message: Optional[str],
    ) -> None:
        self.translation_in_progress = False
        self.translate_button.config(state="normal")

        if summary is not None and summary.results:
            result = summary.results[0]
            message = message or result.error
            self._set_output(result.text)

        if message:
            self.status_var.set("Translation ended with issues.")
            messagebox.showerror("Glossa", message)
        else:
            self.status_var.set("Translation complete.")

    def _set_output(self, text: str) -> None:
        self.output_text.config(state="normal")
        self.output_text.delete("1.0", "end")
        self.output_text.insert("1.0", text)
        self.output_text.config(state="disabled")

    def _on_close(self) -> None:
        if self.translation_in_progress:
            self.exit_code = 2
        self.root.destroy()


def launch_gui(
    *,
    args: Any,
    settings: GlossaConfig,
    translation_executor: TranslationExecutor,
    provider_debug: bool,
) -> int:
    """Entry point called from the CLI when --gui is provided."""

    root = tk.Tk()
    app = GlossaGUI(
        root=root,
        args=args,
        settings=settings,
        translation_executor=translation_executor,
        provider_debug=provider_debug,
    )
    root.mainloop()
    return app.exit_code
