"""Accounts API.

회원가입/로그인/토큰 수명주기를 담당하는 계정 서비스입니다.
"""
