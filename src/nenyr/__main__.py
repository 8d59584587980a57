from nenyr.cli import main

main()
