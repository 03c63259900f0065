BLACK = (0, 0, 0)
RED = (255, 0, 0)

BACKENDS = ("pygame", "headless")

def create_hardware(config):
    backend = config.get("display", "backend", "pygame").lower()
    width = int(config.get("display", "width", 800))
    height = int(config.get("display", "height", 600))

    if backend == "pygame":
        from dodecaspin.sim.hardware_sim import GraphicsSim, GUISim
        graphics = GraphicsSim(width, height)
        gu = GUISim(
            graphics,
            fps=config.get("display", "fps", 60),
            title=config.get("display", "title", "Color Coded"),
        )
    elif backend == "headless":
        from dodecaspin.sim.headless import HeadlessGraphics, HeadlessGU
        graphics = HeadlessGraphics(width, height)
        gu = HeadlessGU(graphics)
    else:
        raise RuntimeError(f"Unknown display backend: {backend}")

    return graphics, gu
