from gitpr.cli.cli import main

main()
