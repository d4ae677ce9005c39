"""SMTP Mailer.

Mailer 포트의 구현체입니다.

발송은 fire-and-forget입니다:
    - smtplib 호출은 asyncio.to_thread로 스레드에서 실행
    - 태스크 참조를 완료 시까지 보관
    - 실패는 done-callback에서 로그만 남김
"""

from __future__ import annotations

import asyncio
import logging
import smtplib
import ssl
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from typing import TYPE_CHECKING

from apps.accounts.domain.value_objects.email import Email
from apps.accounts.infrastructure.mail.templates import confirmation_html, reset_password_html

if TYPE_CHECKING:
    from apps.accounts.domain.entities.user import User

logger = logging.getLogger(__name__)

SMTP_TIMEOUT = 30  # seconds


class SmtpMailer:
    """SMTP 메일 발송기.

    smtp_host가 비어 있으면 (로컬 개발) 발송 대신 로그만 남깁니다.
    smtp_user가 비어 있으면 인증 없는 릴레이로 보고 login을 생략합니다.
    """

    def __init__(
        self,
        *,
        frontend_url: str,
        smtp_host: str = "",
        smtp_port: int = 587,
        smtp_user: str = "",
        smtp_password: str = "",
        smtp_use_tls: bool = True,
        from_name: str = "Accounts",
        from_address: str = "",
    ) -> None:
        self._frontend_url = frontend_url.rstrip("/")
        self._smtp_host = smtp_host
        self._smtp_port = smtp_port
        self._smtp_user = smtp_user
        self._smtp_password = smtp_password
        self._smtp_use_tls = smtp_use_tls
        self._from_name = from_name
        self._from_address = from_address or smtp_user or f"noreply@{smtp_host or 'localhost'}"
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def is_configured(self) -> bool:
        return bool(self._smtp_host)

    def send_confirmation_mail(self, user: "User", token: str) -> None:
        link = f"{self._frontend_url}/auth/confirm/{token}"
        self._dispatch(Email(user.email), "Confirm your email", confirmation_html(user.name, link))

    def send_reset_password_email(self, user: "User", token: str) -> None:
        link = f"{self._frontend_url}/auth/reset-password/{token}"
        self._dispatch(
            Email(user.email), "Reset your password", reset_password_html(user.name, link)
        )

    async def drain(self) -> None:
        """대기 중인 발송 태스크 완료 대기 (종료 시)."""
        if self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)

    def _dispatch(self, to: Email, subject: str, html: str) -> None:
        if not self.is_configured:
            logger.info(
                "Mail not sent, SMTP not configured",
                extra={"to": to.masked, "subject": subject},
            )
            return

        task = asyncio.get_running_loop().create_task(
            asyncio.to_thread(self._send, to.value, subject, html)
        )
        self._tasks.add(task)
        task.add_done_callback(lambda t: self._on_done(t, to, subject))

    def _on_done(self, task: "asyncio.Task[None]", to: Email, subject: str) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            logger.error(
                "Mail delivery failed",
                extra={"to": to.masked, "subject": subject},
                exc_info=error,
            )
            return
        logger.info("Mail sent", extra={"to": to.masked, "subject": subject})

    def _send(self, to_email: str, subject: str, html: str) -> None:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = subject
        msg["From"] = f"{self._from_name} <{self._from_address}>"
        msg["To"] = to_email
        msg.attach(MIMEText(html, "html"))

        with self._connect() as server:
            if self._smtp_user:
                server.login(self._smtp_user, self._smtp_password)
            server.sendmail(self._from_address, to_email, msg.as_string())

    def _connect(self) -> smtplib.SMTP:
        context = ssl.create_default_context()
        if self._smtp_use_tls:
            server = smtplib.SMTP(self._smtp_host, self._smtp_port, timeout=SMTP_TIMEOUT)
            try:
                server.starttls(context=context)
            except (smtplib.SMTPException, OSError):
                server.close()
                raise
            return server
        return smtplib.SMTP_SSL(
            self._smtp_host, self._smtp_port, context=context, timeout=SMTP_TIMEOUT
        )
