from wator.config import WorldConfig
from wator.logging_config import configure_logging
from wator.viewer import run_live

if __name__ == "__main__":
    configure_logging()
    # Quarter-size version of the reference world, watchable at full frame rate.
    run_live(WorldConfig(width=320, height=240, n_fish=3000, n_sharks=1000, seed=21), fps=30)
