from nestspec.cli import main


main()
