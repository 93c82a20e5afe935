from fastapi import APIRouter, Request, Depends, HTTPException
import logging
from family_budget.domains.categories.models import CategoryCreate, CategoryUpdate
from family_budget.domains.categories.service import (
    CategoryNotFoundError,
    CategoryService,
    InvalidCategoryTypeError,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories")


def get_category_service(request: Request) -> CategoryService:
    return request.app.state.category_service


@router.get("")
async def get_categories(service: CategoryService = Depends(get_category_service)):
    categories = service.list_all()
    return {"data": categories, "count": len(categories)}


@router.post("", status_code=201)
async def create_category(data: CategoryCreate, service: CategoryService = Depends(get_category_service)):
    try:
        category = service.create(data)
    except InvalidCategoryTypeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"data": category}


@router.get("/{category_id}")
async def get_category(category_id: int, service: CategoryService = Depends(get_category_service)):
    try:
        return {"data": service.get(category_id)}
    except CategoryNotFoundError:
        raise HTTPException(status_code=404, detail="Category not found")


@router.put("/{category_id}")
async def update_category(
    category_id: int,
    data: CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
):
    try:
        category = service.update(category_id, data)
    except CategoryNotFoundError:
        raise HTTPException(status_code=404, detail="Category not found")
    except InvalidCategoryTypeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"data": category}


@router.delete("/{category_id}")
async def delete_category(category_id: int, service: CategoryService = Depends(get_category_service)):
    try:
        service.delete(category_id)
    except CategoryNotFoundError:
        logger.warning(f"Delete requested for missing category {category_id}")
        raise HTTPException(status_code=404, detail="Category not found")
    return {"message": "Category deleted successfully"}
