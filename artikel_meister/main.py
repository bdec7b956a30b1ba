from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn
import logging

# Импорт модулей приложения
from artikel_meister.api.words import router as words_router
from artikel_meister.api.lists import router as lists_router
from artikel_meister.api.progress import router as progress_router

# Настройка логирования
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Создание приложения FastAPI
app = FastAPI(
    title="Artikel Meister",
    description="Adaptive German article and vocabulary trainer",
    version="1.0.0"
)

# CORS настройки для API
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # В продакшене нужно указать конкретные домены
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Подключение роутеров API
app.include_router(words_router, prefix="/api/words", tags=["words"])
app.include_router(lists_router, prefix="/api/lists", tags=["lists"])
app.include_router(progress_router, prefix="/api/progress", tags=["progress"])


@app.get("/health")
async def health_check():
    return {"status": "ok"}


def run():
    uvicorn.run("artikel_meister.main:app", host="0.0.0.0", port=8000)


# Запуск приложения (для отладки)
if __name__ == "__main__":
    uvicorn.run("artikel_meister.main:app", host="0.0.0.0", port=8000, reload=True)
