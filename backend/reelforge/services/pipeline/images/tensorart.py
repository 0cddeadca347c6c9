"""
TensorArt job API mapping.

Builds the text-to-image job description and reads the fields the poll loop
needs out of job responses. Kept free of I/O so it can be tested directly.
"""

import hashlib
import time
from typing import Any, Dict, Optional

from reelforge.models import JobStatus

JOBS_PATH = "/v1/jobs"

SD_MODEL_ID = "770694094415489962"
SD_VAE = "sdxl-vae-fp16-fix.safetensors"
SAMPLER = "Euler a"
STEPS = 20
CFG_SCALE = 3
CLIP_SKIP = 1
ETA_NOISE_SEED_DELTA = 31337
NEGATIVE_PROMPT = "nsfw"
LORA_WEIGHT = 0.7
LORA_MODEL_IDS = (
    "766419665653268679",
    "777630084346589138",
    "776587863287492519",
)


def new_request_id() -> str:
    """md5 of the current time in milliseconds"""
    return hashlib.md5(str(int(time.time() * 1000)).encode()).hexdigest()


def build_job_payload(
    prompt: str,
    width: int,
    height: int,
    request_id: Optional[str] = None,
) -> Dict[str, Any]:
    """Job description for a single txt2img generation."""
    return {
        "request_id": request_id or new_request_id(),
        "stages": [
            {
                "type": "INPUT_INITIALIZE",
                "inputInitialize": {
                    "seed": -1,
                    "count": 1,
                },
            },
            {
                "type": "DIFFUSION",
                "diffusion": {
                    "width": width,
                    "height": height,
                    "prompts": [{"text": prompt}],
                    "negativePrompts": [{"text": NEGATIVE_PROMPT}],
                    "sdModel": SD_MODEL_ID,
                    "sdVae": SD_VAE,
                    "sampler": SAMPLER,
                    "steps": STEPS,
                    "cfgScale": CFG_SCALE,
                    "clipSkip": CLIP_SKIP,
                    "etaNoiseSeedDelta": ETA_NOISE_SEED_DELTA,
                    "lora": {
                        "items": [
                            {"loraModel": model_id, "weight": LORA_WEIGHT}
                            for model_id in LORA_MODEL_IDS
                        ]
                    },
                },
            },
        ],
    }


def build_headers(api_key: str) -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
        "Authorization": f"Bearer {api_key}",
    }


def _job(data: Any) -> Dict[str, Any]:
    if isinstance(data, dict) and isinstance(data.get("job"), dict):
        return data["job"]
    return {}


def parse_job_id(data: Any) -> Optional[str]:
    job_id = _job(data).get("id")
    return str(job_id) if job_id else None


def parse_job_status(data: Any) -> JobStatus:
    return JobStatus.from_provider(_job(data).get("status"))


def parse_result_url(data: Any) -> Optional[str]:
    """``job.successInfo.images[0].url`` or None"""
    success_info = _job(data).get("successInfo") or {}
    images = success_info.get("images") if isinstance(success_info, dict) else None
    if not images or not isinstance(images[0], dict):
        return None
    return images[0].get("url") or None
