"""
Reconstruction module

Pipeline восстановления секретов по входному документу и CLI.
"""

from src.reconstruction.pipeline import (
    CaseOutcome,
    CaseStatus,
    MalformedInputError,
    ReconstructionConfig,
    format_secrets,
    parse_input_document,
    process_cases,
    reconstruct_case,
    reconstruct_secrets,
)

__all__ = [
    "CaseOutcome",
    "CaseStatus",
    "MalformedInputError",
    "ReconstructionConfig",
    "format_secrets",
    "parse_input_document",
    "process_cases",
    "reconstruct_case",
    "reconstruct_secrets",
]
