from __future__ import annotations

import asyncio
import base64
import contextlib
from pathlib import Path

import gradio as gr
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from shoe_assistant.config import settings
from shoe_assistant.errors import (
    AnalysisFailedError,
    AnalysisUnavailableError,
    ImageQualityError,
    MissingImageError,
)
from shoe_assistant.llm.prompts import DEFAULT_LANGUAGE, supported_languages
from shoe_assistant.schemas import AnalyzeShoeRequest
from shoe_assistant.services.assistant_service import ShoeAssistantService


async def _refresh_catalog_periodically(service: ShoeAssistantService, interval: int) -> None:
    while True:
        await asyncio.sleep(interval)
        await asyncio.to_thread(service.load_catalog)


def build_demo(service: ShoeAssistantService) -> gr.Blocks:
    async def analyze_fn(image_path: str | None, problem: str, part: str, brand: str, language: str) -> dict:
        if not image_path:
            return {"error": "No image provided"}
        encoded = base64.b64encode(Path(image_path).read_bytes()).decode("ascii")
        request = AnalyzeShoeRequest(
            base64_image=encoded,
            problem_description=problem,
            affected_part=part,
            brand=brand,
            language=language,
        )
        try:
            return await service.analyze_shoe(request)
        except ImageQualityError as exc:
            return {"error": "image_quality", "message": exc.message}
        except (AnalysisUnavailableError, AnalysisFailedError) as exc:
            return {"error": "analysis_failed", "message": str(exc)}

    with gr.Blocks(title="AI Shoe Assistant") as demo:
        gr.Markdown(
            """
            # AI Shoe Assistant
            Upload a photo of a shoe to identify the model and materials, get cleaning advice,
            and see matching care products from the shop.
            """
        )
        with gr.Row():
            with gr.Column():
                image = gr.Image(type="filepath", label="Shoe photo")
                problem = gr.Textbox(label="Problem description")
                part = gr.Textbox(label="Affected part")
                brand = gr.Textbox(label="Brand")
                language = gr.Dropdown(choices=supported_languages(), value=DEFAULT_LANGUAGE, label="Language")
                submit = gr.Button("Analyze")
            with gr.Column():
                result = gr.JSON(label="Analysis")
        submit.click(analyze_fn, inputs=[image, problem, part, brand, language], outputs=result)
    return demo


def create_app(service: ShoeAssistantService | None = None, mount_ui: bool = True) -> FastAPI:
    service = service or ShoeAssistantService()

    @contextlib.asynccontextmanager
    async def lifespan(_app: FastAPI):
        await asyncio.to_thread(service.load_catalog)
        refresher = None
        if settings.catalog_refresh_seconds > 0:
            refresher = asyncio.create_task(
                _refresh_catalog_periodically(service, settings.catalog_refresh_seconds)
            )
        yield
        if refresher:
            refresher.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await refresher

    app = FastAPI(title="AI Shoe Assistant", version="1.0.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.service = service

    @app.get("/", response_class=PlainTextResponse)
    def root() -> str:
        return "AI Shoe Assistant Backend Server is running"

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok", "stats": service.stats()}

    @app.post("/catalog/reload")
    async def reload_catalog() -> dict:
        size = await asyncio.to_thread(service.load_catalog)
        return {"products": size, "last_error": service.store.last_error}

    @app.post("/analyze-shoe")
    async def analyze_shoe(request: AnalyzeShoeRequest):
        print("[API] Received a POST request to /analyze-shoe")
        if request.base64_image and len(request.base64_image) > settings.max_image_bytes:
            raise HTTPException(status_code=413, detail="Image too large")
        try:
            return await service.analyze_shoe(request)
        except MissingImageError as exc:
            return PlainTextResponse(str(exc), status_code=400)
        except ImageQualityError as exc:
            return JSONResponse({"error": "image_quality", "message": exc.message}, status_code=400)
        except AnalysisUnavailableError as exc:
            raise HTTPException(status_code=503, detail=str(exc)) from exc
        except AnalysisFailedError as exc:
            print(f"[ERROR][API] Error processing image: {exc}")
            return PlainTextResponse("Error processing image", status_code=500)

    if mount_ui:
        app = gr.mount_gradio_app(app, build_demo(service), path="/ui")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)
