#!/usr/bin/env python3
"""
Camera OCR demonstration script.

Plays the role of the capture surface: reads a photo from disk, encodes it
as base64, sends it through the orchestrator and prints the recognized text.

Usage:
    VISION_API_ENDPOINT="https://vision.googleapis.com/v1/images:annotate?key=..." \\
        python examples/camera_ocr_demo.py photo.jpg
"""

import argparse
import asyncio
import base64
import logging
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from camera_ocr import CameraOCROrchestrator, VisionConfig, FeatureType

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Extract text from a photo with the Vision API")
    parser.add_argument("image", type=Path, help="JPEG or PNG file to read")
    parser.add_argument(
        "--feature-type",
        choices=[feature.value for feature in FeatureType],
        default=None,
        help="Override VISION_FEATURE_TYPE"
    )
    parser.add_argument("--debug", action="store_true", help="Log text assembly diagnostics")
    return parser.parse_args(argv)


async def run(image_path: Path, feature_type=None) -> int:
    config = VisionConfig.from_env()
    if feature_type:
        config = config.model_copy(update={'feature_type': FeatureType(feature_type)})

    orchestrator = CameraOCROrchestrator(config=config)
    base64_image = base64.b64encode(image_path.read_bytes()).decode("ascii")

    try:
        results = await orchestrator.perform_ocr(base64_image)
    except Exception:
        logger.exception("OCR failed")
        print("❌ OCR processing failed")
        return 1

    if not results:
        print("⚠️  No text detected")
        return 0

    for result in results:
        print(f"📝 Confidence: {result.confidence:.2f}")
        print(result.text)
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.debug:
        logging.getLogger("camera_ocr").setLevel(logging.DEBUG)
    if not args.image.is_file():
        print(f"❌ Image not found: {args.image}")
        return 2
    return asyncio.run(run(args.image, args.feature_type))


if __name__ == "__main__":
    sys.exit(main())
