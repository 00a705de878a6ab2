import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ayurveda_store.config import settings
from ayurveda_store.database import create_db_and_tables
from ayurveda_store.routes import (
    appointments,
    auth,
    contact,
    gallery,
    gallery_admin,
    health,
    orders,
    payments,
    products,
    products_admin,
    reviews_admin,
    shiprocket,
    upload,
)

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Run DB creation ONLY in local; migrations own the schema elsewhere
    if settings.ENV == "local":
        create_db_and_tables()
    yield

app = FastAPI(title="Ayurveda Clinic Store API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    problems = [
        f"{'.'.join(str(part) for part in err['loc'] if part != 'body')}: {err['msg']}"
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"error": "; ".join(problems) or "Invalid request"},
    )


app.include_router(products.router, prefix="/api/products", tags=["Products"])
app.include_router(orders.router, prefix="/api/orders", tags=["Orders"])
app.include_router(payments.router, prefix="/api/payments", tags=["Payments"])
app.include_router(shiprocket.router, prefix="/api/shiprocket", tags=["Shipping"])
app.include_router(appointments.router, prefix="/api/appointments", tags=["Appointments"])
app.include_router(contact.router, prefix="/api/contact", tags=["Contact"])
app.include_router(gallery.router, prefix="/api/gallery", tags=["Gallery"])
app.include_router(health.router, prefix="/api", tags=["Health"])

app.include_router(auth.router, prefix="/api/admin", tags=["Admin Auth"])
app.include_router(products_admin.router, prefix="/api/admin/products", tags=["Admin Products"])
app.include_router(reviews_admin.router, prefix="/api/admin/reviews", tags=["Admin Reviews"])
app.include_router(gallery_admin.router, prefix="/api/admin/gallery", tags=["Admin Gallery"])
app.include_router(upload.router, prefix="/api/upload", tags=["Admin Uploads"])


@app.get("/")
def root():
    return {
        "catalog": ["/api/products", "/api/products/{id}", "/api/products/{id}/reviews"],
        "checkout": [
            "/api/orders/create", "/api/payments/create-order",
            "/api/payments/verify", "/api/shiprocket/tracking/{order_id}",
        ],
        "clinic": ["/api/appointments", "/api/contact", "/api/gallery"],
        "admin": [
            "/api/admin/login", "/api/admin/products", "/api/admin/reviews",
            "/api/admin/gallery", "/api/upload/image", "/api/orders",
        ],
    }
