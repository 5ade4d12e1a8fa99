"""Product catalog API routes."""

from __future__ import annotations

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...application.dtos import (
    CreateProductDTO,
    ProductResponseDTO,
    RenameCategoryDTO,
    RenameCategoryResponseDTO,
    UpdateProductDTO,
)
from ...application.use_cases.product import ProductService
from ..dependencies import get_product_service

router = APIRouter(prefix="/products", tags=["products"])


@router.post("/", response_model=ProductResponseDTO, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_data: CreateProductDTO,
    product_service: ProductService = Depends(get_product_service),
) -> ProductResponseDTO:
    """Create a new product."""
    return await product_service.create_product(product_data)


@router.get("/", response_model=List[ProductResponseDTO])
async def get_products(
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=1000),
    category: Optional[str] = Query(None, description="Filter by category"),
    active_only: bool = Query(False, description="Hide inactive products"),
    search: Optional[str] = Query(
        None, max_length=200, description="Case-insensitive name search"
    ),
    product_service: ProductService = Depends(get_product_service),
) -> List[ProductResponseDTO]:
    """Get products, newest first, with optional filters and pagination."""
    return await product_service.get_products(
        skip=skip,
        limit=limit,
        category=category,
        active_only=active_only,
        search=search,
    )


@router.get("/categories", response_model=List[str])
async def get_categories(
    product_service: ProductService = Depends(get_product_service),
) -> List[str]:
    """Get the categories currently used by products."""
    return await product_service.get_categories()


@router.post("/categories/rename", response_model=RenameCategoryResponseDTO)
async def rename_category(
    rename_data: RenameCategoryDTO,
    product_service: ProductService = Depends(get_product_service),
) -> RenameCategoryResponseDTO:
    """Rename a category across all of its products."""
    try:
        return await product_service.rename_category(rename_data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/{product_id}", response_model=ProductResponseDTO)
async def get_product(
    product_id: UUID, product_service: ProductService = Depends(get_product_service)
) -> ProductResponseDTO:
    """Get product by ID."""
    product = await product_service.get_product_by_id(product_id)
    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Product not found"
        )
    return product


@router.put("/{product_id}", response_model=ProductResponseDTO)
async def update_product(
    product_id: UUID,
    product_data: UpdateProductDTO,
    product_service: ProductService = Depends(get_product_service),
) -> ProductResponseDTO:
    """Update a product."""
    product = await product_service.update_product(product_id, product_data)
    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Product not found"
        )
    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: UUID, product_service: ProductService = Depends(get_product_service)
):
    """Delete a product."""
    success = await product_service.delete_product(product_id)
    if not success:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Product not found"
        )
