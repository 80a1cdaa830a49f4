"""Deserializer for XML outcome reports."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from xml.etree import ElementTree

from outcome_loader.errors import LoadError
from outcome_loader.models.outcome import TestOutcome
from outcome_loader.reporters.base import OutcomeDeserializer

log = logging.getLogger(__name__)

ROOT_ELEMENT = "acceptance-test-run"


@dataclass(frozen=True)
class XmlOutcomeDeserializer(OutcomeDeserializer):
    """Loads outcomes stored as an <acceptance-test-run> document.

    Expected layout::

        <acceptance-test-run name="..." title="..." result="SUCCESS"
                             duration="120" timestamp="...">
          <user-story id="..." name="..." path="..."/>
          <tags><tag name="..." type="..."/></tags>
          <issues><issue>ABC-1</issue></issues>
          <test-step result="SUCCESS" duration="10">
            <description>...</description>
            <exception>...</exception>
            <test-step>...</test-step>
          </test-step>
        </acceptance-test-run>
    """

    def parse(self, path: Path, content: bytes) -> TestOutcome | None:
        """Parse the XML document and validate it as a test outcome."""
        try:
            root = ElementTree.fromstring(content)
        except ElementTree.ParseError as e:
            raise LoadError(path, e) from e

        if root.tag != ROOT_ELEMENT:
            log.debug("Skipping %s: root element is <%s>", path, root.tag)
            return None

        try:
            data = outcome_data(root)
        except RecursionError as e:
            raise LoadError(path, e) from e

        return self.validate(path, data)


def outcome_data(root: ElementTree.Element) -> dict[str, Any]:
    """Convert an <acceptance-test-run> element into model input."""
    data: dict[str, Any] = dict(root.attrib)

    if (story := root.find("user-story")) is not None:
        data["user_story"] = dict(story.attrib)

    data["tags"] = [dict(tag.attrib) for tag in root.iterfind("tags/tag")]
    data["issues"] = [
        (issue.text or "").strip() for issue in root.iterfind("issues/issue")
    ]
    data["steps"] = [step_data(step) for step in root.iterfind("test-step")]
    return data


def step_data(step: ElementTree.Element) -> dict[str, Any]:
    """Convert a <test-step> element, including nested steps."""
    data: dict[str, Any] = dict(step.attrib)
    data["description"] = (step.findtext("description") or "").strip()

    if (error := step.findtext("exception")) is not None:
        data["error_message"] = error.strip()

    data["children"] = [step_data(child) for child in step.iterfind("test-step")]
    return data
