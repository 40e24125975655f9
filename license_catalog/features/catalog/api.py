from fastapi import APIRouter, HTTPException, Request

from license_catalog.features.catalog.errors import CatalogLoadError
from license_catalog.features.catalog.service import CatalogService

router = APIRouter(prefix="/api/licenses", tags=["catalog"])


def _service(request: Request) -> CatalogService:
    cfg = request.app.state.cfg
    return CatalogService(provider=cfg.provider(), language=cfg.language)


@router.get("")
async def list_licenses(request: Request, lang: str | None = None) -> dict[str, object]:
    service = _service(request)
    try:
        cards = await service.list_cards(language=lang)
    except CatalogLoadError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return {
        "language": lang or request.app.state.cfg.language,
        "count": len(cards),
        "licenses": [c.to_dict() for c in cards],
    }


@router.get("/{spdx}")
async def get_license(request: Request, spdx: str, lang: str | None = None) -> dict[str, object]:
    try:
        card = await _service(request).get_card(spdx=spdx, language=lang)
    except CatalogLoadError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if card is None:
        raise HTTPException(status_code=404, detail="license_not_found")
    return card.to_dict()
