"""Application Exceptions.

공통 예외만 포함합니다. 기능별 예외는 각 패키지에서 직접 import하세요:
  - apps.volunteers.application.auth.exceptions.*
  - apps.volunteers.application.categories.exceptions.*
  - apps.volunteers.application.contacts.exceptions.*
"""

from apps.volunteers.application.common.exceptions.base import ApplicationError

__all__ = ["ApplicationError"]
