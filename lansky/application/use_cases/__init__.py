"""Application use cases."""

from lansky.application.use_cases.edit_product_image import EditProductImageUseCase
from lansky.application.use_cases.export_ledger import CsvExport, ExportLedgerUseCase
from lansky.application.use_cases.generate_advice import AdviceResult, GenerateAdviceUseCase
from lansky.application.use_cases.record_sale import RecordSaleUseCase

__all__ = [
    "RecordSaleUseCase",
    "GenerateAdviceUseCase",
    "AdviceResult",
    "EditProductImageUseCase",
    "ExportLedgerUseCase",
    "CsvExport",
]
