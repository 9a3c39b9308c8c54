"""
Identity provider client (AWS Cognito user pools).

Exposes the three calls the service needs: look a user up by subject,
mirror profile attributes back, and verify a bearer access token. When no
user pool is configured a disabled provider stands in so the API can run
with public reads only.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from banderas.errors import IdentityProviderError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IdentityClaims:
    sub: str
    email: str
    username: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company: Optional[str] = None

    @classmethod
    def from_attributes(cls, username: str, attributes: list[dict]) -> "IdentityClaims":
        attrs = {a.get("Name"): a.get("Value") for a in attributes or []}
        return cls(
            sub=attrs.get("sub") or username,
            email=(attrs.get("email") or "").lower(),
            username=username,
            first_name=attrs.get("given_name"),
            last_name=attrs.get("family_name"),
            company=attrs.get("custom:company_name"),
        )


class IdentityProvider:
    def get_user(self, user_id: str) -> Optional[IdentityClaims]:
        raise NotImplementedError

    def update_user_attributes(self, user_id: str, attributes: dict[str, str]) -> None:
        raise NotImplementedError

    def verify_access_token(self, token: str) -> Optional[IdentityClaims]:
        raise NotImplementedError


class DisabledIdentityProvider(IdentityProvider):
    """Knows no users and accepts no tokens."""

    def get_user(self, user_id: str) -> Optional[IdentityClaims]:
        return None

    def update_user_attributes(self, user_id: str, attributes: dict[str, str]) -> None:
        logger.debug("Identity provider disabled; skipping attribute update for %s", user_id[:8])

    def verify_access_token(self, token: str) -> Optional[IdentityClaims]:
        return None


class CognitoIdentityProvider(IdentityProvider):
    def __init__(self, user_pool_id: str, region: str, client=None):
        self.user_pool_id = user_pool_id
        self.region = region
        self._client = client or boto3.client("cognito-idp", region_name=region)

    def get_user(self, user_id: str) -> Optional[IdentityClaims]:
        try:
            response = self._client.admin_get_user(UserPoolId=self.user_pool_id, Username=user_id)
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") == "UserNotFoundException":
                return None
            raise IdentityProviderError(f"Cognito lookup failed for {user_id[:8]}") from e
        except BotoCoreError as e:
            raise IdentityProviderError(f"Cognito lookup failed for {user_id[:8]}") from e
        return IdentityClaims.from_attributes(response["Username"], response.get("UserAttributes", []))

    def update_user_attributes(self, user_id: str, attributes: dict[str, str]) -> None:
        try:
            self._client.admin_update_user_attributes(
                UserPoolId=self.user_pool_id,
                Username=user_id,
                UserAttributes=[{"Name": name, "Value": value} for name, value in attributes.items()],
            )
        except (ClientError, BotoCoreError) as e:
            raise IdentityProviderError(f"Cognito attribute update failed for {user_id[:8]}") from e

    def verify_access_token(self, token: str) -> Optional[IdentityClaims]:
        """Resolve an access token to claims; ``None`` when Cognito rejects it."""
        try:
            response = self._client.get_user(AccessToken=token)
        except ClientError as e:
            code = e.response.get("Error", {}).get("Code")
            if code in {"NotAuthorizedException", "UserNotFoundException", "InvalidParameterException"}:
                return None
            raise IdentityProviderError("Cognito token verification failed") from e
        except BotoCoreError as e:
            raise IdentityProviderError("Cognito token verification failed") from e
        return IdentityClaims.from_attributes(response["Username"], response.get("UserAttributes", []))


def identity_provider_from_env() -> IdentityProvider:
    user_pool_id = (os.getenv("AWS_COGNITO_USER_POOL_ID") or "").strip()
    region = (os.getenv("AWS_REGION") or "").strip()
    if not user_pool_id or not region:
        logger.warning(
            "AWS_COGNITO_USER_POOL_ID/AWS_REGION not set; identity provider disabled, "
            "all mutations will be rejected unless DEV_MODE is on"
        )
        return DisabledIdentityProvider()
    return CognitoIdentityProvider(user_pool_id=user_pool_id, region=region)
