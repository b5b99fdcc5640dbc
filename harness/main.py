from fastapi import FastAPI
from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from harness.api.routes import router
from harness.observability.logging import log
from harness.settings import settings

app = FastAPI(title="Lifecycle Mock API")

# The flow runner may live on another origin (or be a browser page)
origins = [x.strip() for x in settings.CORS_ORIGINS.split(",") if x.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


@app.get("/")
def root():
    return {
        "status": "ok",
        "message": "Mock API is running. Endpoints: POST /api/cadastro, GET /api/login, "
                   "PUT /api/alteracao, GET /api/pedidos.",
    }


@app.get("/health")
def health():
    return {"status": "ok"}


# Anything unexpected still answers in the {erro} shape the runner understands.
@app.exception_handler(Exception)
async def universal_exception_handler(request: Request, exc: Exception):
    log(
        "unhandled_exception",
        path=request.url.path,
        errorType=type(exc).__name__,
        error=str(exc)[:500],
    )
    return JSONResponse(status_code=500, content={"erro": "Internal Server Error"})


log("boot", corsOrigins=origins, randomSeeded=bool(settings.HARNESS_RANDOM_SEED))
