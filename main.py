import sys

# Configuration
from config import DispatchConfig, load_dispatch_config

# HTTP adapter
from server.http_server import run_server


def run(config_path=None):
    """
    Load configuration and serve the lift dispatch API

    Args:
        config_path: Path to a YAML configuration file (defaults to the
            built-in four-lift bank on localhost:3000)
    """
    if config_path:
        config = load_dispatch_config(config_path)
        print(f"Loaded configuration from {config_path}")
    else:
        config = DispatchConfig()
        print("Using default configuration")

    print(f"Lift bank: {', '.join(f'#{lift.id}@{lift.level}' for lift in config.lift_bank.lifts)}")
    run_server(config)


def main():
    """Console entry point: liftserver [config.yaml]"""
    # Accept command line argument for config file
    config_path = sys.argv[1] if len(sys.argv) > 1 else None
    run(config_path=config_path)


if __name__ == '__main__':
    main()
