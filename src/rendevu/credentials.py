"""
Credential specifications.

Describes every secret rendevu reads from the environment: Cal.com for the
tool server, and one key per generative-text provider for the webhook relay.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class CredentialSpec:
    """Where a credential lives and how a user obtains it."""

    env_var: str
    help_url: str = ""
    api_key_instructions: str = ""

    def get(self) -> str | None:
        """Read the credential from the environment, treating blanks as unset."""
        value = os.getenv(self.env_var)
        return value or None

    @property
    def help(self) -> str:
        text = f"Set {self.env_var} environment variable"
        if self.help_url:
            text += f" (see {self.help_url})"
        if self.api_key_instructions:
            text += f"\n\n{self.api_key_instructions}"
        return text


CREDENTIALS = {
    "calcom": CredentialSpec(
        env_var="CALCOM_API_KEY",
        help_url="https://cal.com/docs/api-reference/v2",
        api_key_instructions="""To get a Cal.com API key:
1. Log in to Cal.com
2. Go to Settings > Developer > API Keys
3. Click "Create new API key"
4. Give it a name and set expiration
5. Copy the key (shown only once)""",
    ),
    "anthropic": CredentialSpec(
        env_var="ANTHROPIC_API_KEY",
        help_url="https://console.anthropic.com/settings/keys",
    ),
    "openai": CredentialSpec(
        env_var="OPENAI_API_KEY",
        help_url="https://platform.openai.com/api-keys",
    ),
}
