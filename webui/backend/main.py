from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

app = FastAPI(title="VRChime WebUI API")

# 前端（桌面壳）从本地加载，放开跨域限制
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


from .api import launch

app.include_router(launch.router, prefix="/api", tags=["Launch"])

@app.get("/api")
def read_root():
    """
    根路径，用于测试API是否正常工作
    """
    return {"message": "欢迎来到 VRChime WebUI 后端"}
