from tempconv.cli.main import main

main()
