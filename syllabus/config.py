"""
syllabus/config.py — konfiguracja ekstrakcji.

Zmienne środowiskowe:
  SYLX_VARIANT   wariant dokumentu: generic | extended (domyślnie: generic)
  SYLX_BRANCH    wartość pola "branch" w każdym rekordzie (domyślnie: "")

Opcjonalnie plik .env w katalogu głównym projektu:
  SYLX_VARIANT=extended
  SYLX_BRANCH=CSE

Kolejność: argument (CLI) > zmienna środowiskowa > wartość domyślna.
"""

from __future__ import annotations

import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

from .variants import DocumentVariant, VariantRules, rules_for

_ENV_VARIANT = "SYLX_VARIANT"
_ENV_BRANCH  = "SYLX_BRANCH"
_DOTENV_PATH = pathlib.Path(__file__).resolve().parent.parent / ".env"


@dataclass(frozen=True, slots=True)
class ExtractionConfig:
    variant: DocumentVariant = DocumentVariant.GENERIC
    branch: str = ""

    @property
    def rules(self) -> VariantRules:
        return rules_for(self.variant)


def load_config(variant: str | None = None, branch: str | None = None) -> ExtractionConfig:
    """
    Buduje ExtractionConfig z argumentów, środowiska i .env.

    Raises:
        ValueError: nieznana nazwa wariantu.
    """
    load_dotenv(_DOTENV_PATH, override=False)

    variant_name = variant or os.getenv(_ENV_VARIANT) or DocumentVariant.GENERIC.value
    try:
        resolved = DocumentVariant(variant_name.strip().lower())
    except ValueError:
        allowed = ", ".join(v.value for v in DocumentVariant)
        raise ValueError(f"Nieznany wariant dokumentu {variant_name!r} (dozwolone: {allowed})") from None

    if branch is None:
        branch = os.getenv(_ENV_BRANCH, "")
    return ExtractionConfig(variant=resolved, branch=branch)
