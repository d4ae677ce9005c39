"""Mailer Port.

메일 발송은 fire-and-forget입니다. 호출은 즉시 반환되고
전송 실패는 구현체 내부에서 로그로만 남습니다.
"""

from typing import Protocol

from apps.accounts.domain.entities.user import User


class Mailer(Protocol):
    """메일 발송 인터페이스.

    구현체:
        - SmtpMailer (infrastructure/mail/)
    """

    def send_confirmation_mail(self, user: User, token: str) -> None:
        """이메일 인증 메일 발송 예약."""
        ...

    def send_reset_password_email(self, user: User, token: str) -> None:
        """비밀번호 재설정 메일 발송 예약."""
        ...
