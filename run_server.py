#!/usr/bin/env python3
"""
Storefront Backend Startup Script
This script starts the FastAPI server.
"""

import logging
import os

import uvicorn

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    logger.info("Starting Storefront Backend...")
    logger.info("Available endpoints:")
    logger.info("  - Health Check: GET /health")
    logger.info("  - Users: GET/POST/PUT/DELETE /users")
    logger.info("  - Products: GET/POST/PUT/DELETE /products")
    logger.info("  - Orders: GET/POST /orders")
    logger.info("  - API Docs: http://localhost:8000/docs")

    uvicorn.run(
        "storefront.main:create_app",
        factory=True,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        reload=os.getenv("RELOAD", "false").lower() == "true",
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )
