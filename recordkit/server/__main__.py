from recordkit.server.main import run

run()
