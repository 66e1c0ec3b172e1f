from pagewright._cli import main

main()
