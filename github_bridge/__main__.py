from github_bridge.server import run

run()
