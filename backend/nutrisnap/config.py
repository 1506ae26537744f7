from pathlib import Path

from pydantic_settings import BaseSettings


DEFAULT_SYSTEM_PROMPT = """
You are NutriSnap AI, a specialized clinical nutritionist.
ALWAYS format your responses using professional Markdown:
1. Use ### for section headers.
2. Use **bold** for important keywords, food names, or calorie counts.
3. Use bullet points for all lists or diet plans.
4. Keep paragraphs short and concise.
5. Only answer health and nutrition-related questions.
"""


class Settings(BaseSettings):
    # General
    app_name: str = "NutriSnap Backend"
    environment: str = "dev"

    # Provider (any OpenAI-compatible chat-completions API)
    groq_api_key: str | None = None
    provider_base_url: str = "https://api.groq.com/openai/v1"
    model_name: str = "llama-3.3-70b-versatile"
    system_prompt: str = DEFAULT_SYSTEM_PROMPT.strip()
    provider_timeout: float | None = None

    # None forwards the whole history
    max_history_messages: int | None = None

    log_dir: Path = Path(__file__).resolve().parents[1] / "logs"

    # Chat client
    relay_url: str = "http://127.0.0.1:5000/api/chat"
    client_timeout: float | None = None
    history_path: Path = Path.home() / ".nutrisnap" / "storage.json"

    class Config:
        env_file = ".env"


settings = Settings()
