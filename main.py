import uvicorn

from tacos.app import CONFIG, config


if __name__ == "__main__":
    uvicorn.run(
        "tacos.app:app",
        host="127.0.0.1",
        port=8080,
        reload=CONFIG.env == config.Env.local,
    )
