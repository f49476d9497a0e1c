"""Validation exceptions."""

from apps.volunteers.domain.exceptions.base import DomainError


class ValidationError(DomainError):
    """도메인 값 검증 실패."""


class InvalidEmailError(ValidationError):
    """이메일 형식 오류."""
