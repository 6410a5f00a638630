from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .app.blueprint.compiler import compile_blueprint
from .app.blueprint.errors import BlueprintNotRenderableError, BlueprintValidationError
from .app.blueprint.normalizer import normalize_blueprint
from .app.blueprint.validator import assert_renderable, validate
from .app.config.settings import settings
from .app.core.factories import create_test_blueprint
from .app.models.blueprint import SceneBlueprint
from .app.schemas.render_request import CompileRequest, VerificationBlueprintRequest
from .app.utils.fingerprint import payload_fingerprint
from .app.utils.logging import logger


app = FastAPI(title=settings.API_TITLE)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BlueprintValidationError)
def blueprint_validation_error_handler(request: Request, exc: BlueprintValidationError):
    logger.warning(f"Rejected blueprint on {request.url.path}: {exc}")
    return JSONResponse(status_code=422, content={"ok": False, "errors": [str(exc)]})


@app.exception_handler(BlueprintNotRenderableError)
def blueprint_not_renderable_handler(request: Request, exc: BlueprintNotRenderableError):
    logger.warning(f"Preflight failed on {request.url.path}: {exc.errors}")
    return JSONResponse(status_code=422, content={"ok": False, "errors": exc.errors})


@app.get("/health")
def health():
    return {"status": "ok"}


@app.post("/api/blueprints/validate")
def validate_blueprint(blueprint: dict):
    # Structural problems come back as data; only unparseable documents are rejected.
    try:
        parsed = SceneBlueprint.model_validate(blueprint)
    except ValidationError as e:
        raise BlueprintValidationError(f"Blueprint has malformed fields: {e.error_count()} error(s)") from e
    return validate(parsed).model_dump()


@app.post("/api/blueprints/normalize")
def normalize(blueprint: dict):
    normalized = normalize_blueprint(blueprint)
    return {"ok": True, "blueprint": normalized.model_dump(mode="json", by_alias=True)}


@app.post("/api/blueprints/compile")
def compile_render_payload(req: CompileRequest):
    blueprint = assert_renderable(normalize_blueprint(req.blueprint))
    logger.info(f"Blueprint {blueprint.id} passed preflight")

    payload = compile_blueprint(blueprint, audio_url=req.music_url, captions=req.captions)
    return {
        "ok": True,
        "blueprint_id": blueprint.id,
        "fingerprint": payload_fingerprint(payload),
        "payload": payload.to_renderer_json(),
    }


@app.post("/api/blueprints/test")
def verification_blueprint(req: VerificationBlueprintRequest):
    blueprint = create_test_blueprint(req.clips, blueprint_id=req.blueprint_id)
    return {"ok": True, "blueprint": blueprint.model_dump(mode="json", by_alias=True)}
