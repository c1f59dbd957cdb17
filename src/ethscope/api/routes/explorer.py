# File: src/ethscope/api/routes/explorer.py
from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel
from typing import List
from ethscope.explorer.explorer import BlockExplorer
from ethscope.explorer.models import BlockView, TransactionRow, TransactionDetail

router = APIRouter(prefix="/api/v1/explorer")

class SelectRequest(BaseModel):
    hash: str

class SelectResponse(BaseModel):
    selected_hash: str

def get_explorer(request: Request) -> BlockExplorer:
    return request.app.state.explorer

@router.get("/block", response_model=BlockView)
async def get_block(explorer: BlockExplorer = Depends(get_explorer)):
    return explorer.block_view()

@router.post("/block/previous", response_model=BlockView)
async def previous_block(explorer: BlockExplorer = Depends(get_explorer)):
    explorer.go_previous()
    return explorer.block_view()

@router.post("/block/next", response_model=BlockView)
async def next_block(explorer: BlockExplorer = Depends(get_explorer)):
    explorer.go_next()
    return explorer.block_view()

@router.get("/transactions", response_model=List[TransactionRow])
async def get_transactions(explorer: BlockExplorer = Depends(get_explorer)):
    return explorer.transaction_rows()

@router.post("/transactions/select", response_model=SelectResponse)
async def select_transaction(body: SelectRequest, explorer: BlockExplorer = Depends(get_explorer)):
    return SelectResponse(selected_hash=explorer.select(body.hash))

@router.get("/transactions/selected", response_model=TransactionDetail)
async def get_selected_transaction(explorer: BlockExplorer = Depends(get_explorer)):
    return explorer.transaction_detail()
