"""Custom exception hierarchy for contactview."""

from __future__ import annotations


class ContactViewError(Exception):
    """Base class for all custom errors raised by contactview."""


# --- 3-layer hierarchy ---

class DomainError(ContactViewError):
    """Base class for domain-level errors."""


class InfrastructureError(ContactViewError):
    """Base class for infrastructure-level errors."""


class ApplicationError(ContactViewError):
    """Base class for application-level errors."""


# --- Programming errors ---

class InvariantViolation(ContactViewError):
    """Raised when a caller breaks a contract of the view pipeline."""


class UnsortableFieldError(InvariantViolation):
    """Raised when sorting is requested on a field that is not sortable."""


# --- Domain errors ---

class UnknownFieldError(DomainError):
    """Raised when an edit names a field outside the known field set."""


class RecordNotFoundError(DomainError):
    """Raised when the requested record cannot be located."""


# --- Infrastructure errors ---

class GatewayError(InfrastructureError):
    """Raised by a backend gateway when a remote call fails."""


class FetchFailure(InfrastructureError):
    """Raised when loading the canonical collection did not complete."""


class SaveFailure(InfrastructureError):
    """Raised when the backend rejected a batched save."""


# --- Application errors ---

class ValidationFailure(ApplicationError):
    """Raised when form input fails field-level validation."""


# --- DI-specific errors ---

class CircularDependencyError(ContactViewError):
    """Raised when a circular dependency is detected during resolution."""


class ResolutionError(ContactViewError):
    """Raised when a dependency cannot be resolved."""


# --- Settings ---

class SettingsError(ContactViewError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""
