from fastapi import Request

from splitbook.db.session import Store


def get_store(request: Request) -> Store:
    return request.app.state.store


async def get_db(request: Request):
    async with get_store(request).session() as session:
        yield session
