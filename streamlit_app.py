"""Streamlit Web UI for prompt-crafter.

Sign in, type a prompt, and get an enhanced version back in any supported
language. Suggestions are regenerated from the prompt as it changes.
"""

from __future__ import annotations

import asyncio
import logging
import os

logger = logging.getLogger(__name__)

import nest_asyncio
import streamlit as st
from dotenv import load_dotenv

load_dotenv()
nest_asyncio.apply()

# Streamlit Cloud: sync st.secrets → os.environ so backend clients can read them
for key in ("FIREBASE_API_KEY", "GOOGLE_TRANSLATE_API_KEY", "HUGGINGFACE_API_KEY"):
    if key not in os.environ:
        try:
            os.environ[key] = st.secrets[key]
        except Exception:
            pass

from prompt_crafter.clients.auth_client import FirebaseAuthClient
from prompt_crafter.config import load_config
from prompt_crafter.errors import AuthError, InvalidArgument
from prompt_crafter.models.enhancement import EnhancementRequest, ModelSelector
from prompt_crafter.models.language import language_name, list_supported_languages
from prompt_crafter.models.session import Session
from prompt_crafter.models.tools import AI_TOOLS
from prompt_crafter.pipeline.orchestrator import open_pipeline
from prompt_crafter.pipeline.suggestions import generate_suggestions

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------

st.set_page_config(
    page_title="PromptCrafterAI",
    page_icon=":sparkles:",
    layout="wide",
)

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _get_config():
    return load_config()


def _store_session(session: Session | None) -> None:
    if session is None:
        st.session_state.pop("session", None)
    else:
        st.session_state["session"] = session


async def _auth_action(action: str, email: str, password: str, confirm: str | None = None):
    config = _get_config()
    async with FirebaseAuthClient(
        base_url=config.auth.base_url,
        timeout=config.auth.timeout,
        session=st.session_state.get("session"),
    ) as auth:
        auth.observe_session(_store_session)
        if action == "sign_in":
            return await auth.sign_in(email, password)
        return await auth.sign_up(email, password, confirm_password=confirm)


async def _enhance(request: EnhancementRequest, session: Session | None, on_phase):
    async with open_pipeline(_get_config()) as pipeline:
        return await pipeline.run(request, session=session, on_phase=on_phase)


def _use_suggestion(text: str) -> None:
    st.session_state["prompt_input"] = text


# ---------------------------------------------------------------------------
# Auth gate
# ---------------------------------------------------------------------------


def _auth_gate() -> None:
    st.markdown("## PromptCrafterAI")
    st.caption("Intelligent Prompt Enhancement Platform")

    tab_in, tab_up = st.tabs(["Sign in", "Sign up"])

    with tab_in:
        with st.form("sign_in"):
            email = st.text_input("Email")
            password = st.text_input("Password", type="password")
            submitted = st.form_submit_button("Sign in", type="primary")
        if submitted:
            try:
                asyncio.run(_auth_action("sign_in", email, password))
                st.rerun()
            except AuthError as e:
                st.error(e.message)
            except ValueError:
                logger.exception("Auth client configuration error")
                st.error("Sign in is not configured. Check FIREBASE_API_KEY.")

    with tab_up:
        with st.form("sign_up"):
            email = st.text_input("Email", key="signup_email")
            password = st.text_input("Password", type="password", key="signup_password")
            confirm = st.text_input("Confirm password", type="password", key="signup_confirm")
            submitted = st.form_submit_button("Create account", type="primary")
        if submitted:
            try:
                asyncio.run(_auth_action("sign_up", email, password, confirm))
                st.rerun()
            except InvalidArgument as e:
                st.error(str(e))
            except AuthError as e:
                st.error(e.message)
            except ValueError:
                logger.exception("Auth client configuration error")
                st.error("Sign up is not configured. Check FIREBASE_API_KEY.")


session: Session | None = st.session_state.get("session")
if session is None:
    _auth_gate()
    st.stop()

# ---------------------------------------------------------------------------
# Sidebar: profile, sign out, AI tools
# ---------------------------------------------------------------------------

with st.sidebar:
    st.title("PromptCrafterAI")
    st.markdown(f"### {session.initials} · {session.label}")
    st.caption(session.email)
    st.caption(f"User ID: {session.uid}")
    if session.created_at:
        st.caption(f"Member since {session.created_at:%B %d, %Y}")

    # Local only, so it works without FIREBASE_API_KEY.
    if st.button("Sign out", key="sign_out"):
        for k in ("enhanced_result", "prompt_input"):
            st.session_state.pop(k, None)
        _store_session(None)
        st.rerun()

    st.divider()
    st.subheader("AI tools")
    for tool in AI_TOOLS:
        st.markdown(f"[{tool.name}]({tool.url}): {tool.description}")

# ---------------------------------------------------------------------------
# Main: prompt input and enhancement
# ---------------------------------------------------------------------------

config = _get_config()
languages = list_supported_languages()

col_input, col_side = st.columns([2, 1])

with col_input:
    st.header("Prompt input")
    prompt = st.text_area(
        "Your prompt",
        key="prompt_input",
        height=180,
        max_chars=config.pipeline.max_prompt_chars,
        placeholder="Enter your prompt here... (e.g., 'Write a blog post about AI')",
    )

    c1, c2 = st.columns(2)
    with c1:
        output_language = st.selectbox(
            "Output language",
            options=[lang.code for lang in languages],
            format_func=language_name,
        )
    with c2:
        model = st.selectbox(
            "Model",
            options=list(ModelSelector),
            format_func=lambda m: m.label,
        )

    api_key = None
    if model.requires_credential:
        api_key = st.text_input(
            "Anthropic API key",
            type="password",
            placeholder="sk-ant-...",
            help="Used for this request only; never stored.",
        )

    if st.button("Enhance prompt", type="primary", disabled=not prompt.strip()):
        request = EnhancementRequest(
            prompt=prompt,
            output_language=output_language,
            model=model,
            credential=api_key,
        )
        progress_bar = st.progress(0, text="Starting...")
        phases = {
            "detect": 0.15,
            "translate_input": 0.35,
            "enhance": 0.55,
            "translate_output": 0.85,
            "done": 1.0,
        }

        def on_phase(phase: str, detail: str):
            progress_bar.progress(phases.get(phase, 0), text=detail)

        try:
            result = asyncio.run(_enhance(request, session, on_phase))
        except InvalidArgument as e:
            st.error(str(e))
        except Exception:
            logger.exception("Prompt enhancement failed")
            st.error("Failed to enhance prompt. Please try again.")
        else:
            st.session_state["enhanced_result"] = result

    if "enhanced_result" in st.session_state:
        result = st.session_state["enhanced_result"]
        st.success(
            f"Detected: {language_name(result.detected_language)} | "
            f"Output: {language_name(result.output_language)} | "
            f"{result.elapsed_seconds:.1f}s"
        )
        st.subheader("Enhanced prompt")
        st.code(result.enhanced_text, language=None, wrap_lines=True)

with col_side:
    st.subheader("Stats")
    st.metric("Characters", f"{len(prompt)}/{config.pipeline.max_prompt_chars}")
    st.metric("Input words", len(prompt.split()))
    if "enhanced_result" in st.session_state:
        st.metric("Output words", len(st.session_state["enhanced_result"].enhanced_text.split()))
    st.metric("Languages", len(languages))

    suggestions = generate_suggestions(prompt, limit=config.pipeline.max_suggestions)
    if suggestions:
        st.subheader("Suggestions")
        for i, s in enumerate(suggestions):
            st.button(s, key=f"suggestion_{i}", on_click=_use_suggestion, args=(s,))
