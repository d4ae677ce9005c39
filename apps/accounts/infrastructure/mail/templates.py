"""Mail templates."""

from __future__ import annotations

from html import escape

_LAYOUT = """\
<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>{title}</title></head>
<body style="font-family: sans-serif; line-height: 1.6; color: #1f2933;">
  <p>Hello {name},</p>
  <p>{intro}</p>
  <p><a href="{link}">{action}</a></p>
  <p style="color: #6b7280; font-size: 12px;">{footer}</p>
</body>
</html>
"""


def confirmation_html(name: str, link: str) -> str:
    return _LAYOUT.format(
        title="Confirm your email",
        name=escape(name),
        intro="Welcome! Please confirm your email address to activate your account.",
        link=escape(link, quote=True),
        action="Confirm email",
        footer="If you did not create an account, you can ignore this email.",
    )


def reset_password_html(name: str, link: str) -> str:
    return _LAYOUT.format(
        title="Reset your password",
        name=escape(name),
        intro="We received a request to reset your password.",
        link=escape(link, quote=True),
        action="Reset password",
        footer="If you did not request a password reset, you can ignore this email.",
    )
