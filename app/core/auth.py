from dataclasses import dataclass, field
from typing import Optional, Protocol

from fastapi import Header, Request

from app.core.config import Settings


class IdentityProvider(Protocol):
    """외부 인증 벤더(Firebase 등)와의 경계."""

    def verify_token(self, id_token: str) -> Optional[dict]:
        ...

    def issue_token(self, uid: str) -> str:
        ...


class FirebaseIdentityProvider:
    """Firebase Admin SDK 는 첫 검증 요청 때 초기화한다."""

    def __init__(self, settings: Settings):
        self.settings = settings

    def verify_token(self, id_token: str) -> Optional[dict]:
        from app.core.firebase import init_firebase, verify_firebase_token

        init_firebase(self.settings)
        return verify_firebase_token(id_token)

    def issue_token(self, uid: str) -> str:
        from app.core.firebase import init_firebase, create_custom_token

        init_firebase(self.settings)
        return create_custom_token(uid)


@dataclass(frozen=True)
class Principal:
    uid: str
    email: Optional[str] = None
    name: Optional[str] = None
    claims: dict = field(default_factory=dict)


@dataclass(frozen=True)
class AuthContext:
    """
    요청 단위 인증 컨텍스트.

    - principal: 검증된 사용자 (없으면 None)
    - error_code: principal 이 없는 이유 (AUTH_401_x)
    - issue_token(): 현재 principal 에 대한 bearer 토큰 발급
    """
    provider: IdentityProvider
    principal: Optional[Principal] = None
    error_code: Optional[str] = None

    @property
    def is_authenticated(self) -> bool:
        return self.principal is not None

    def issue_token(self) -> str:
        if self.principal is None:
            raise PermissionError("no verified principal")
        return self.provider.issue_token(self.principal.uid)


def build_auth_context(provider: IdentityProvider, authorization: Optional[str]) -> AuthContext:
    # 1) Authorization 헤더 확인
    if authorization is None:
        return AuthContext(provider, error_code="AUTH_401_1")

    if not authorization.startswith("Bearer "):
        return AuthContext(provider, error_code="AUTH_401_2")

    parts = authorization.split(" ")
    if len(parts) != 2 or not parts[1]:
        return AuthContext(provider, error_code="AUTH_401_3")

    # 2) 토큰 검증
    decoded = provider.verify_token(parts[1])
    if decoded is None:
        return AuthContext(provider, error_code="AUTH_401_4")

    uid = decoded.get("uid") or decoded.get("sub")
    if not uid:
        return AuthContext(provider, error_code="AUTH_401_4")

    principal = Principal(
        uid=uid,
        email=decoded.get("email"),
        name=decoded.get("name") or decoded.get("displayName"),
        claims=decoded,
    )
    return AuthContext(provider, principal=principal)


def get_auth_context(
    request: Request,
    authorization: Optional[str] = Header(None, description="Firebase ID 토큰 (형식: Bearer <token>)"),
) -> AuthContext:
    return build_auth_context(request.app.state.identity_provider, authorization)
