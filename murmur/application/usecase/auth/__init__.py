"""Auth use cases."""

from .send_code import SendCodeRequest, SendCodeResponse, SendCodeUseCase
from .verify_code import VerifyCodeRequest, VerifyCodeResponse, VerifyCodeUseCase

__all__ = [
    "SendCodeRequest",
    "SendCodeResponse",
    "SendCodeUseCase",
    "VerifyCodeRequest",
    "VerifyCodeResponse",
    "VerifyCodeUseCase",
]
