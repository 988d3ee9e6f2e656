from fleetview.cli.cli import main

main()
