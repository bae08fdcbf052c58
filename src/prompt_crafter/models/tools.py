"""Catalogue of external AI tools linked from the UI."""

from __future__ import annotations

from pydantic import BaseModel


class AITool(BaseModel):
    name: str
    url: str
    description: str


AI_TOOLS: tuple[AITool, ...] = (
    AITool(name="ChatGPT", url="https://chat.openai.com", description="Conversational AI Assistant"),
    AITool(name="DeepSeek", url="https://chat.deepseek.com", description="Advanced AI Reasoning"),
    AITool(name="Claude", url="https://claude.ai", description="AI Assistant by Anthropic"),
    AITool(name="Lovable", url="https://lovable.dev", description="AI-Powered Development"),
    AITool(name="Vercel", url="https://vercel.com", description="Frontend Cloud Platform"),
    AITool(name="Firebase", url="https://firebase.google.com", description="Backend as a Service"),
    AITool(name="Supabase", url="https://supabase.com", description="Open Source Firebase"),
    AITool(name="Replicate", url="https://replicate.com", description="Run AI Models in the Cloud"),
)
