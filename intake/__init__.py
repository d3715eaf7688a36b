"""Intake Module - document upload to AI feedback pipeline."""
from intake.parser import DocumentParser, ParsedDocument
from intake.pipeline import DocumentIntakePipeline, IntakeStage, select_template

__all__ = [
    'DocumentParser',
    'ParsedDocument',
    'DocumentIntakePipeline',
    'IntakeStage',
    'select_template',
]
