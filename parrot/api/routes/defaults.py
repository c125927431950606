"""Default store endpoints.

- GET    /defaults/{store}         - all values
- PUT    /defaults/{store}         - replace all values
- PATCH  /defaults/{store}         - merge values
- DELETE /defaults/{store}         - clear
- PUT    /defaults/{store}/{name}  - set one value
- DELETE /defaults/{store}/{name}  - delete one value

{store} is "placeholders" or "variants".
"""

from fastapi import APIRouter, Depends

from parrot.api.dependencies import get_engine
from parrot.api.models import DefaultsResponse, DefaultsUpdate, DefaultValue, StoreName
from parrot.controller import Parrot

router = APIRouter(prefix="/defaults")


def _response(engine: Parrot, store: StoreName) -> DefaultsResponse:
    return DefaultsResponse(store=store, values=engine.stores.get(store.value).get())


@router.get("/{store}", response_model=DefaultsResponse)
def get_defaults(store: StoreName, engine: Parrot = Depends(get_engine)):
    return _response(engine, store)


@router.put("/{store}", response_model=DefaultsResponse)
def replace_defaults(store: StoreName, update: DefaultsUpdate, engine: Parrot = Depends(get_engine)):
    """Replace the whole store in one step."""
    engine.stores.get(store.value).replace(update.values)
    return _response(engine, store)


@router.patch("/{store}", response_model=DefaultsResponse)
def update_defaults(store: StoreName, update: DefaultsUpdate, engine: Parrot = Depends(get_engine)):
    engine.stores.get(store.value).update(update.values)
    return _response(engine, store)


@router.delete("/{store}", response_model=DefaultsResponse)
def clear_defaults(store: StoreName, engine: Parrot = Depends(get_engine)):
    engine.stores.get(store.value).clear()
    return _response(engine, store)


@router.put("/{store}/{name}", response_model=DefaultsResponse)
def set_default(store: StoreName, name: str, body: DefaultValue, engine: Parrot = Depends(get_engine)):
    engine.stores.get(store.value).set(name, body.value)
    return _response(engine, store)


@router.delete("/{store}/{name}", response_model=DefaultsResponse)
def delete_default(store: StoreName, name: str, engine: Parrot = Depends(get_engine)):
    engine.stores.get(store.value).delete(name)
    return _response(engine, store)
