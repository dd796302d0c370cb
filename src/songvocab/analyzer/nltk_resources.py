"""Centralized NLTK resource management."""

from __future__ import annotations

from enum import Enum
from typing import Final

import nltk

from songvocab.exceptions import NLTKResourceError
from songvocab.logging import get_logger

logger = get_logger("analyzer.nltk_resources")


class NLTKResource(Enum):
    """NLTK resources used by songvocab.

    Each value is a tuple of (data_path, download_name) where:
    - data_path: Path to check in nltk.data.find()
    - download_name: Package name for nltk.download()
    """

    WORDNET = ("corpora/wordnet", "wordnet")
    OMW = ("corpora/omw-1.4", "omw-1.4")


LEMMATIZER_RESOURCES: Final[tuple[NLTKResource, ...]] = (
    NLTKResource.WORDNET,
    NLTKResource.OMW,
)


def ensure_resource(resource: NLTKResource) -> None:
    """Ensure a single NLTK resource is available.

    Checks if the resource exists locally, and downloads it if not.

    Args:
        resource: NLTK resource to check/download.

    Raises:
        NLTKResourceError: If resource cannot be downloaded.
    """
    path, name = resource.value
    try:
        nltk.data.find(path)
        logger.debug("NLTK resource '%s' already available", name)
    except LookupError:
        logger.debug("Downloading NLTK resource '%s'", name)
        try:
            ok = nltk.download(name, quiet=True)
        except Exception as e:
            raise NLTKResourceError(
                f"Failed to download NLTK resource '{name}': {e}",
                resource_name=name,
            ) from e
        if ok is False:
            raise NLTKResourceError(
                f"Failed to download NLTK resource '{name}'",
                resource_name=name,
            )
        logger.debug("Successfully downloaded NLTK resource '%s'", name)


def ensure_resources(resources: tuple[NLTKResource, ...]) -> None:
    """Ensure multiple NLTK resources are available.

    Args:
        resources: Tuple of NLTK resources to check/download.

    Raises:
        NLTKResourceError: If any resource cannot be downloaded.
    """
    for resource in resources:
        ensure_resource(resource)
