from __future__ import annotations

from typing import Dict, List, Optional, Set

import structlog
from fastapi import FastAPI, HTTPException, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from controller import DispatchEngine, configure_logging
from fleet import InvalidConfigurationError, Settings

logger = structlog.get_logger(__name__)


class SelectorChoice(BaseModel):
    name: str
    options: Dict[str, object] = {}


class PickupRequest(BaseModel):
    floor: int = Field(..., ge=0)
    direction: int = Field(..., description="1 for up, -1 for down")


class TargetRequest(BaseModel):
    elevator_id: int = Field(..., ge=0)
    floor: int = Field(..., ge=0)


class BuildingConfigModel(BaseModel):
    number_of_floors: int
    active_elevators: int


class FleetManager:
    """Routes API calls to the engine and pushes fleet state to stream subscribers."""

    def __init__(self, engine: DispatchEngine) -> None:
        self.engine = engine
        self.subscribers: Set[WebSocket] = set()

    def current_state(self) -> dict:
        return self.engine.snapshot()

    async def publish_state(self) -> dict:
        state = self.current_state()
        stale: List[WebSocket] = []
        for subscriber in list(self.subscribers):
            try:
                await subscriber.send_json(state)
            except (WebSocketDisconnect, RuntimeError):
                stale.append(subscriber)
        for subscriber in stale:
            self.unsubscribe(subscriber)
        return state

    async def subscribe(self, websocket: WebSocket) -> None:
        await websocket.accept()
        self.subscribers.add(websocket)
        await websocket.send_json(self.current_state())
        logger.info("stream_subscribed", subscribers=len(self.subscribers))

    def unsubscribe(self, websocket: WebSocket) -> None:
        self.subscribers.discard(websocket)
        logger.info("stream_unsubscribed", subscribers=len(self.subscribers))

    async def pickup(self, floor: int, direction: int) -> Optional[int]:
        elevator_id = self.engine.pickup(floor, direction)
        if elevator_id is not None:
            await self.publish_state()
        return elevator_id

    async def add_target(self, elevator_id: int, floor: int) -> bool:
        accepted = self.engine.add_target(elevator_id, floor)
        if accepted:
            await self.publish_state()
        return accepted

    async def step(self) -> List[List[int]]:
        arrivals = self.engine.step()
        await self.publish_state()
        return [[elevator_id, floor] for elevator_id, floor in arrivals]

    async def configure(self, number_of_floors: int, active_elevators: int) -> dict:
        self.engine.configure(number_of_floors, active_elevators)
        return await self.publish_state()

    async def set_selector(self, name: str, options: Dict[str, object]) -> dict:
        self.engine.set_selector(name, **options)
        return await self.publish_state()


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    engine = DispatchEngine(
        settings.building_config(),
        selector_name=settings.selector,
        selector_options=settings.selector_options,
    )
    manager = FleetManager(engine)

    app = FastAPI(title="LiftDispatch API")
    app.state.manager = manager
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/api/elevators/status")
    async def get_status() -> dict:
        return {"elevators": manager.current_state()["elevators"]}

    @app.post("/api/elevators/pickup")
    async def pickup(request: PickupRequest) -> dict:
        elevator_id = await manager.pickup(request.floor, request.direction)
        if elevator_id is None:
            raise HTTPException(status_code=404, detail="No suitable elevator found for pickup request")
        return {"elevator_id": elevator_id}

    @app.post("/api/elevators/target")
    async def add_target(request: TargetRequest) -> dict:
        accepted = await manager.add_target(request.elevator_id, request.floor)
        if not accepted:
            raise HTTPException(status_code=404, detail="Elevator unavailable or floor out of range")
        return {"accepted": True}

    @app.post("/api/elevators/step")
    async def step() -> dict:
        arrivals = await manager.step()
        return {"arrivals": arrivals, "elevators": manager.current_state()["elevators"]}

    @app.get("/api/building/config")
    async def get_config() -> dict:
        return manager.engine.get_config().as_dict()

    @app.post("/api/building/config")
    async def configure(config: BuildingConfigModel) -> dict:
        try:
            state = await manager.configure(config.number_of_floors, config.active_elevators)
        except InvalidConfigurationError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
        return state["config"]

    @app.post("/api/dispatch/selector")
    async def set_selector(selection: SelectorChoice) -> dict:
        try:
            return await manager.set_selector(selection.name, selection.options)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc))

    @app.websocket("/ws/stream")
    async def stream(websocket: WebSocket) -> None:
        await manager.subscribe(websocket)
        try:
            async for _ in websocket.iter_text():
                pass
        finally:
            manager.unsubscribe(websocket)

    return app


def main() -> None:
    import uvicorn

    settings = Settings.from_env()
    logger.info("server_starting", host=settings.host, port=settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, reload=False)


if __name__ == "__main__":
    main()
