"""Failure taxonomy. Every error here aborts the operation before any mutation."""

from __future__ import annotations


class BuilderGenerationError(Exception):
    """Base class for aborted builder generations."""

    kind: str = "BuilderGenerationError"
    title: str = "Cannot Create Builder"


class IncompleteSelectionError(BuilderGenerationError):
    """A mode needing a pick (setters, constructor, package) got none."""

    kind = "IncompleteSelection"
    title = "Cannot Proceed"

    def __init__(self, selection: str) -> None:
        self.selection = selection
        super().__init__(f"No {selection} selected.")


class NoCandidatesError(BuilderGenerationError):
    """The class offers nothing to pick from for the requested mode."""

    kind = "NoCandidates"

    _messages = {
        "setters": "No setter methods found in the class.",
        "constructors": "No constructors found in the class.",
    }

    def __init__(self, candidates: str) -> None:
        self.candidates = candidates
        self.title = f"No {candidates.capitalize()}"
        super().__init__(self._messages.get(candidates, f"No {candidates} found in the class."))


class ConflictingModesError(BuilderGenerationError):
    kind = "ConflictingModes"
    title = "Cannot Proceed"

    def __init__(self) -> None:
        super().__init__("'Use setter' and 'Use exist constructor' cannot both be selected.")


class UnsupportedCombinationError(BuilderGenerationError):
    kind = "UnsupportedCombination"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class NameCollisionError(BuilderGenerationError):
    """The builder's name is already taken at its destination."""

    kind = "NameCollision"

    def __init__(self, name: str, location: str, inner: bool = False) -> None:
        self.name = name
        self.location = location
        self.inner = inner
        if inner:
            message = f"An inner builder class named '{name}' already exists in {location}."
        else:
            message = f"File '{name}' already exists in {location}"
        super().__init__(message)
