# llm/summarizer.py

import anyio
import google.generativeai as genai

from core.config import settings

EMPTY_TEXT_MESSAGE = "Lütfen özetlenecek bir metin girin."
MISSING_KEY_MESSAGE = "API anahtarı bulunamadı. Lütfen ortam değişkenlerini kontrol edin."
FAILURE_MESSAGE = "Özetleme sırasında bir hata oluştu. Lütfen daha sonra tekrar deneyin."


class SummarizerError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyTextError(SummarizerError):
    pass


class SummarizerNotConfiguredError(SummarizerError):
    pass


class SummarizationError(SummarizerError):
    pass


def is_configured() -> bool:
    return bool(settings.GEMINI_API_KEY)


def build_prompt(text: str) -> str:
    return f"Aşağıdaki metni özetle: {text}"


async def generate_text(prompt: str, model: str | None = None) -> str:
    """
    Базовий виклик Gemini: рядок на вхід, текст на вихід.
    """

    def _call():
        genai.configure(api_key=settings.GEMINI_API_KEY)
        mdl = genai.GenerativeModel(model or settings.GEMINI_MODEL)
        resp = mdl.generate_content(prompt)
        return resp.text

    # Gemini-SDK синхронний → виносимо в окремий потік
    return await anyio.to_thread.run_sync(_call)


async def summarize_text(text: str) -> str:
    """
    Повертає резюме тексту. Порожній текст і відсутній ключ перевіряємо
    до запиту; будь-яка помилка самого виклику дає загальне повідомлення.
    """
    if not text or not text.strip():
        raise EmptyTextError(EMPTY_TEXT_MESSAGE)

    if not is_configured():
        raise SummarizerNotConfiguredError(MISSING_KEY_MESSAGE)

    try:
        return await generate_text(build_prompt(text))
    except Exception as e:
        print(f"Помилка під час виклику Gemini API: {e}")
        raise SummarizationError(FAILURE_MESSAGE) from e
