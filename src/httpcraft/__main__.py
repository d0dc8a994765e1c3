from httpcraft.cli import main

main()
