import uvicorn

from text_editor.config.settings import get_settings


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    # Run FastAPI app from text_editor.main:app
    uvicorn.run(
        "text_editor.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
