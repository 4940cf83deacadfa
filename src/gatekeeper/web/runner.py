"""Uvicorn server runner with custom configuration."""

import copy

import uvicorn
from fastapi import FastAPI
from uvicorn.config import LOGGING_CONFIG

from gatekeeper.config import Config


def build_log_config(service: str) -> dict:
    """Uvicorn logging config whose lines name the service they come from."""
    log_config = copy.deepcopy(LOGGING_CONFIG)
    log_config["formatters"]["access"]["fmt"] = f'%(asctime)s - {service} - "%(request_line)s" %(status_code)s'
    log_config["formatters"]["default"]["fmt"] = f"%(asctime)s - {service} - %(levelname)s - %(message)s"
    return log_config


def run_server(fastapi_app: FastAPI, config: Config, service: str) -> None:
    uvicorn.run(
        fastapi_app, host=config.host, port=config.port, log_config=build_log_config(service), access_log=True
    )
