"""Outcome deserializers, one per report format."""

from outcome_loader.reporters.base import OutcomeDeserializer
from outcome_loader.reporters.json_reporter import JsonOutcomeDeserializer
from outcome_loader.reporters.registry import DESERIALIZERS, deserializer_for
from outcome_loader.reporters.xml_reporter import XmlOutcomeDeserializer

__all__ = [
    "DESERIALIZERS",
    "JsonOutcomeDeserializer",
    "OutcomeDeserializer",
    "XmlOutcomeDeserializer",
    "deserializer_for",
]
