import asyncio
import base64
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from shoe_assistant.schemas import AnalyzeShoeRequest
from shoe_assistant.services.assistant_service import ShoeAssistantService


async def main() -> None:
    if len(sys.argv) < 2:
        print("usage: smoke_test_analyze.py <shoe-photo.jpg> [language]")
        return
    image = base64.b64encode(Path(sys.argv[1]).read_bytes()).decode("ascii")
    language = sys.argv[2] if len(sys.argv) > 2 else "en"

    service = ShoeAssistantService()
    print(f"products={service.load_catalog()}")
    result = await service.analyze_shoe(AnalyzeShoeRequest(base64_image=image, language=language))
    print(f"source={service.analyzer.last_source}")
    print(json.dumps(result, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    asyncio.run(main())
