# inventory/api/v1/routes_items.py
from contextlib import aclosing
from typing import AsyncIterator

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import StreamingResponse
from pydantic import BaseModel

from inventory.core.errors import InvalidItemError
from inventory.core.streams import first
from inventory.domain.items.schemas import (
    HomeUiState,
    ItemDetails,
    ItemDetailsUiState,
    ItemOut,
    ItemUiState,
)
from inventory.ui.home import HomeViewModel
from inventory.ui.item_details import ItemDetailsViewModel
from inventory.ui.item_edit import ItemEditViewModel
from inventory.ui.item_entry import ItemEntryViewModel
from inventory.ui.navigation import ItemDetailsDestination
from inventory.ui.provider import (
    home_view_model,
    item_details_view_model,
    item_edit_view_model,
    item_entry_view_model,
)


router = APIRouter(prefix="/api/v1/items", tags=["items"])


async def sse_events(states: AsyncIterator[BaseModel]) -> AsyncIterator[str]:
    """Format each state as a Server-Sent Event."""
    async with aclosing(states) as values:
        async for state in values:
            yield f"data: {state.model_dump_json()}\n\n"


def _invalid(state: ItemUiState) -> InvalidItemError:
    return InvalidItemError(
        "Name, price and quantity are required",
        item_ui_state=state.model_dump(),
    )


@router.get("", response_model=HomeUiState)
async def list_items_endpoint(vm: HomeViewModel = Depends(home_view_model)):
    return await first(vm.home_ui_state())


@router.get("/stream")
async def stream_items_endpoint(vm: HomeViewModel = Depends(home_view_model)):
    return StreamingResponse(sse_events(vm.home_ui_state()), media_type="text/event-stream")


@router.get("/entry", response_model=ItemUiState)
async def item_entry_endpoint(vm: ItemEntryViewModel = Depends(item_entry_view_model)):
    return vm.item_ui_state


@router.post("", response_model=ItemOut, status_code=status.HTTP_201_CREATED)
async def create_item_endpoint(
    payload: ItemDetails,
    response: Response,
    vm: ItemEntryViewModel = Depends(item_entry_view_model),
):
    # the entry screen always creates a new row
    vm.update_ui_state(payload.model_copy(update={"id": 0}))
    if not vm.item_ui_state.is_entry_valid:
        raise _invalid(vm.item_ui_state)

    item_id = await vm.save_item()
    item = vm.item_ui_state.item_details.to_item()
    item.id = item_id
    response.headers["Location"] = ItemDetailsDestination.api_url(item_id)
    return ItemOut.model_validate(item)


@router.get("/{item_id}", response_model=ItemDetailsUiState)
async def item_details_endpoint(vm: ItemDetailsViewModel = Depends(item_details_view_model)):
    return await vm.current()


@router.get("/{item_id}/stream")
async def stream_item_details_endpoint(
    vm: ItemDetailsViewModel = Depends(item_details_view_model),
):
    await vm.current()
    return StreamingResponse(sse_events(vm.ui_state()), media_type="text/event-stream")


@router.post("/{item_id}/sell", response_model=ItemDetailsUiState)
async def sell_item_endpoint(vm: ItemDetailsViewModel = Depends(item_details_view_model)):
    return await vm.reduce_quantity_by_one()


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_item_endpoint(vm: ItemDetailsViewModel = Depends(item_details_view_model)):
    await vm.delete_item()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{item_id}/edit", response_model=ItemUiState)
async def item_edit_endpoint(vm: ItemEditViewModel = Depends(item_edit_view_model)):
    return await vm.load()


@router.put("/{item_id}", response_model=ItemOut)
async def update_item_endpoint(
    item_id: int,
    payload: ItemDetails,
    vm: ItemEditViewModel = Depends(item_edit_view_model),
):
    await vm.load()
    vm.update_ui_state(payload.model_copy(update={"id": item_id}))
    if not vm.item_ui_state.is_entry_valid:
        raise _invalid(vm.item_ui_state)

    await vm.update_item()
    return ItemOut.model_validate(vm.item_ui_state.item_details.to_item())
