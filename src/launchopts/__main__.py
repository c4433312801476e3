from launchopts.cli import main

main()
