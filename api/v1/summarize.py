# API роутер для AI-резюме

from fastapi import APIRouter, HTTPException, status
from llm import summarizer
from llm.summarizer import EmptyTextError, SummarizerNotConfiguredError, SummarizationError
from models.summary import SummarizeRequest, SummarizeResponse

router = APIRouter()


@router.post("/", response_model=SummarizeResponse)
async def summarize_endpoint(request: SummarizeRequest):
    try:
        summary = await summarizer.summarize_text(request.text)
    except EmptyTextError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)
    except SummarizerNotConfiguredError as e:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=e.message)
    except SummarizationError as e:
        # Причину не віддаємо користувачу, вона вже в логах
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)

    return SummarizeResponse(summary=summary)
