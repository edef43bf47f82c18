"""Helper functions for judging HTTP login responses."""

from __future__ import annotations

import httpx

SUCCESS_INDICATORS = (
    "logout",
    "log out",
    "sign out",
    "sign off",
    "dashboard",
    "welcome",
    "my account",
    "profile",
    "settings",
    "control panel",
)

FAILURE_PHRASES = (
    "access denied",
    "login failed",
    "incorrect password",
    "invalid credentials",
    "invalid username",
    "invalid password",
    "invalid login",
    "authentication failed",
    "wrong password",
    "wrong credentials",
    "cannot log in",
    "unable to log in",
    "login error",
)


def looks_like_login_success(response: httpx.Response, password_field: str = "") -> bool:
    """Guess whether a login form submission succeeded.

    Checks, in order:
    1. Success indicators (definitive when present)
    2. Specific failure *phrases*; single words like "error" show up on too
       many post-login pages
    3. Login-form re-presence: if the password field is still in the
       response the server re-rendered the login form
    """
    text_lower = response.text.lower()

    if any(ind in text_lower for ind in SUCCESS_INDICATORS):
        return True

    if any(phrase in text_lower for phrase in FAILURE_PHRASES):
        return False

    if password_field:
        pw_lower = password_field.lower()
        if f'name="{pw_lower}"' in text_lower or f"name='{pw_lower}'" in text_lower:
            return False

    return response.is_success
