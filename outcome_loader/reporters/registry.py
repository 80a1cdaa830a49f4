"""Mapping of report formats to their deserializers."""

from collections.abc import Mapping

from outcome_loader.errors import ConfigurationError
from outcome_loader.formats import OutcomeFormat
from outcome_loader.reporters.base import OutcomeDeserializer
from outcome_loader.reporters.json_reporter import JsonOutcomeDeserializer
from outcome_loader.reporters.xml_reporter import XmlOutcomeDeserializer

DESERIALIZERS: Mapping[OutcomeFormat, OutcomeDeserializer] = {
    OutcomeFormat.XML: XmlOutcomeDeserializer(),
    OutcomeFormat.JSON: JsonOutcomeDeserializer(),
}


def deserializer_for(
    fmt: OutcomeFormat,
    deserializers: Mapping[OutcomeFormat, OutcomeDeserializer] = DESERIALIZERS,
) -> OutcomeDeserializer:
    """Get the deserializer for a report format.

    Raises:
        ConfigurationError: If no deserializer is registered for the format

    """
    try:
        return deserializers[fmt]
    except KeyError:
        available = [f.name for f in deserializers]
        raise ConfigurationError(
            f"Unsupported report format: {fmt.name}. "
            f"Available formats: {available}"
        ) from None
